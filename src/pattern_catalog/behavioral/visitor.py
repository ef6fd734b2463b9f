"""
Visitor: doctors and salesmen visit the kids of a school.

Dispatch is double: ``Kid.accept`` calls ``visitor.visit_kid(self)``, so each
visitor receives the concrete element type without any casting.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class SchoolVisitor(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def visit_kid(self, kid: "Kid") -> str:
        pass


class SchoolElement(ABC):
    @abstractmethod
    def accept(self, visitor: SchoolVisitor) -> str:
        pass


class Kid(SchoolElement):
    def __init__(self, name: str):
        self.name = name

    def accept(self, visitor: SchoolVisitor) -> str:
        return visitor.visit_kid(self)


class Doctor(SchoolVisitor):
    def visit_kid(self, kid: Kid) -> str:
        return f"Doctor {self.name} visited the school and checked kid {kid.name}"


class Salesman(SchoolVisitor):
    def visit_kid(self, kid: Kid) -> str:
        return f"Salesman {self.name} visited the school and sold a bag to {kid.name}"


class School:
    def __init__(self, elements: Optional[List[SchoolElement]] = None):
        if elements is None:
            elements = [Kid("Dhru"), Kid("ABC"), Kid("XYZ")]
        self._elements = elements

    def perform_operation(self, visitor: SchoolVisitor) -> List[str]:
        return [element.accept(visitor) for element in self._elements]


def demo() -> List[str]:
    school = School()
    lines = school.perform_operation(Doctor("James"))
    lines.append("")
    lines.extend(school.perform_operation(Salesman("John")))
    return lines


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
