"""Iterator: walk a collection without exposing its storage."""

from typing import Iterable, Iterator, List, Optional

DEFAULT_NAMES = ["Dhru", "Amit", "Rahul"]


class NameIterator(Iterator[str]):
    """Explicit cursor over a list of names."""

    def __init__(self, names: List[str]):
        self._names = names
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._names)

    def next(self) -> str:
        if not self.has_next():
            raise StopIteration
        name = self._names[self._position]
        self._position += 1
        return name

    def __next__(self) -> str:
        return self.next()

    def __iter__(self) -> "NameIterator":
        return self


class NameCollection(Iterable[str]):
    def __init__(self, names: Optional[List[str]] = None):
        self._names = list(DEFAULT_NAMES if names is None else names)

    def create_iterator(self) -> NameIterator:
        return NameIterator(self._names)

    def __iter__(self) -> NameIterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._names)


def demo() -> List[str]:
    iterator = NameCollection().create_iterator()
    lines = []
    while iterator.has_next():
        lines.append(iterator.next())
    return lines


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
