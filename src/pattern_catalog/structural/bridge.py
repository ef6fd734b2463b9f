"""
Bridge: the abstraction and its implementation vary independently.

Any ``Abstraction`` can be paired with any ``Implementation``.
"""

from abc import ABC, abstractmethod
from typing import List


class Implementation(ABC):
    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "Concrete Implementation A"


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "Concrete Implementation B"


class Abstraction:
    def __init__(self, implementation: Implementation):
        self._implementation = implementation

    def operation(self) -> str:
        return f"Abstraction: Base Operation with {self._implementation.operation_implementation()}"


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return (
            "ExtendedAbstraction: Extended Operation with "
            f"{self._implementation.operation_implementation()}"
        )


def demo() -> List[str]:
    return [
        Abstraction(ConcreteImplementationA()).operation(),
        ExtendedAbstraction(ConcreteImplementationB()).operation(),
    ]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
