"""
Composite: files and folders share one interface.

Traversal is pre-order: a folder is visited before its children, children in
insertion order.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple


class FileSystemNode(ABC):
    """A node in the file system tree."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def walk(self, depth: int = 0) -> Iterator[Tuple[int, "FileSystemNode"]]:
        """Yield ``(depth, node)`` pairs in pre-order."""
        pass

    def render(self, depth: int = 1) -> List[str]:
        """Render the subtree, one line per node prefixed by ``depth`` dashes."""
        return ["-" * node_depth + node.name for node_depth, node in self.walk(depth)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class File(FileSystemNode):
    def walk(self, depth: int = 0) -> Iterator[Tuple[int, FileSystemNode]]:
        yield depth, self


class Folder(FileSystemNode):
    INDENT = 2

    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[FileSystemNode] = []

    @property
    def children(self) -> List[FileSystemNode]:
        return list(self._children)

    def add(self, node: FileSystemNode) -> "Folder":
        self._children.append(node)
        return self

    def remove(self, node: FileSystemNode) -> None:
        """Remove a direct child. Removing a node that is not a child is a no-op."""
        if node in self._children:
            self._children.remove(node)

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, FileSystemNode]]:
        yield depth, self
        for child in self._children:
            yield from child.walk(depth + self.INDENT)


def demo() -> List[str]:
    root = Folder("Root")
    root.add(File("File1.txt"))
    root.add(Folder("SubFolder"))
    root.add(File("File2.txt"))
    return root.render(1)


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
