"""Proxy: delays loading a document from disk until it is first displayed."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Document(ABC):
    @abstractmethod
    def display(self) -> str:
        pass


class RealDocument(Document):
    def __init__(self, file_name: str):
        self.file_name = file_name
        self.load_message = self._load_from_disk()

    def _load_from_disk(self) -> str:
        logger.debug("Loading document", file_name=self.file_name)
        return f"Loading the file {self.file_name} from disk"

    def display(self) -> str:
        return f"The file {self.file_name} is being displayed to the client"


class DocumentProxy(Document):
    """Stands in for a ``RealDocument`` and creates it on first use."""

    def __init__(self, file_name: str):
        self._file_name = file_name
        self._real_document: Optional[RealDocument] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_document is not None

    @property
    def load_message(self) -> Optional[str]:
        """Message from loading the real document, None until it is loaded."""
        return self._real_document.load_message if self._real_document else None

    def display(self) -> str:
        if self._real_document is None:
            self._real_document = RealDocument(self._file_name)
        return self._real_document.display()


def demo() -> List[str]:
    document = DocumentProxy("resume.pdf")
    lines = [f"Loaded before first display: {document.is_loaded}"]
    first = document.display()
    lines.append(document.load_message)
    lines.append(first)
    lines.append(document.display())
    lines.append(f"Loaded after display: {document.is_loaded}")
    return lines


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
