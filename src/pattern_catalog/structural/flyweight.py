"""
Flyweight: characters are shared by symbol.

The symbol is intrinsic and stored in the shared ``Character``; the position
is extrinsic and passed in by the caller on every use.
"""

from dataclasses import dataclass
from typing import Dict, List

from pattern_catalog.domain.core.exceptions import ValidationError
from pattern_catalog.infrastructure.logging.logger import get_logger


@dataclass(frozen=True)
class Character:
    symbol: str

    def position(self, x: int, y: int) -> str:
        return f"The position of the symbol {self.symbol} is {x},{y}"


class CharacterFactory:
    """Hands out one shared ``Character`` per symbol."""

    def __init__(self):
        self._characters: Dict[str, Character] = {}
        self._logger = get_logger(__name__)

    def get_character(self, symbol: str) -> Character:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValidationError("Flyweight key must be a single character", symbol)

        character = self._characters.get(symbol)
        if character is None:
            character = Character(symbol)
            self._characters[symbol] = character
            self._logger.debug("Created shared character", symbol=symbol)
        return character

    def __len__(self) -> int:
        return len(self._characters)


def demo() -> List[str]:
    factory = CharacterFactory()
    a1 = factory.get_character("A")
    a2 = factory.get_character("A")
    b1 = factory.get_character("B")
    return [
        a1.position(10, 20),
        a2.position(20, 30),
        b1.position(30, 40),
        f"Shared instances: {len(factory)} (A reused: {a1 is a2})",
    ]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
