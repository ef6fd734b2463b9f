"""
Interpreter: integer arithmetic with ``+`` and ``-``.

Expressions are trees of ``Number``, ``Add`` and ``Subtract`` nodes. ``parse``
builds such a tree from text::

    expression := operand (("+" | "-") operand)*
    operand    := INTEGER | "(" expression ")"

Operators are left-associative, so ``10 - 3 - 2`` is ``(10 - 3) - 2``.
Parentheses may nest at most ``MAX_NESTING`` levels deep.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Tuple

from pattern_catalog.domain.core.exceptions import ExpressionSyntaxError


class Expression(ABC):
    @abstractmethod
    def interpret(self) -> int:
        pass


class Number(Expression):
    def __init__(self, value: int):
        self.value = value

    def interpret(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return str(self.value)


class BinaryExpression(Expression):
    symbol = ""

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    @abstractmethod
    def apply(self, left: int, right: int) -> int:
        pass

    def _left_spine(self):
        # Left-associative chains grow down the left side; walk them without recursion.
        spine = []
        node = self
        while isinstance(node, BinaryExpression):
            spine.append(node)
            node = node.left
        return node, reversed(spine)

    def interpret(self) -> int:
        leaf, spine = self._left_spine()
        result = leaf.interpret()
        for node in spine:
            result = node.apply(result, node.right.interpret())
        return result

    def __repr__(self) -> str:
        leaf, spine = self._left_spine()
        text = repr(leaf)
        for node in spine:
            text = f"({text} {node.symbol} {node.right!r})"
        return text


class Add(BinaryExpression):
    symbol = "+"

    def apply(self, left: int, right: int) -> int:
        return left + right


class Subtract(BinaryExpression):
    symbol = "-"

    def apply(self, left: int, right: int) -> int:
        return left - right


OPERATORS = {"+": Add, "-": Subtract}

MAX_NESTING = 100

_TOKEN_RE = re.compile(r"\s*(?:(\d+)|(\S))")

Token = Tuple[str, str, int]


def _tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    for match in _TOKEN_RE.finditer(text):
        number, symbol = match.groups()
        if number is not None:
            tokens.append(("number", number, match.start(1)))
        elif symbol is not None:
            if symbol not in "+-()":
                raise ExpressionSyntaxError(text, match.start(2), f"unexpected character {symbol!r}")
            tokens.append(("symbol", symbol, match.start(2)))
    return tokens


class _Parser:
    def __init__(self, text: str):
        self.text = text
        self.tokens = _tokenize(text)
        self.index = 0
        self.depth = 0

    def _peek(self):
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def _error(self, reason: str) -> ExpressionSyntaxError:
        token = self._peek()
        position = token[2] if token else len(self.text)
        return ExpressionSyntaxError(self.text, position, reason)

    def parse(self) -> Expression:
        if not self.tokens:
            raise self._error("empty expression")
        expression = self._expression()
        if self._peek() is not None:
            raise self._error(f"unexpected token {self._peek()[1]!r}")
        return expression

    def _expression(self) -> Expression:
        left = self._operand()
        token = self._peek()
        while token is not None and token[1] in OPERATORS:
            self.index += 1
            left = OPERATORS[token[1]](left, self._operand())
            token = self._peek()
        return left

    def _operand(self) -> Expression:
        token = self._peek()
        if token is None:
            raise self._error("expected a number or '('")
        kind, value, _ = token
        if kind == "number":
            try:
                number = Number(int(value))
            except ValueError:
                raise self._error("integer literal too long") from None
            self.index += 1
            return number
        if value == "(":
            if self.depth >= MAX_NESTING:
                raise self._error(f"parentheses nested deeper than {MAX_NESTING} levels")
            self.index += 1
            self.depth += 1
            inner = self._expression()
            self.depth -= 1
            closing = self._peek()
            if closing is None or closing[1] != ")":
                raise self._error("expected ')'")
            self.index += 1
            return inner
        raise self._error(f"expected a number or '(' but found {value!r}")


def parse(text: str) -> Expression:
    """
    Parse an arithmetic expression into an expression tree.

    Raises:
        ExpressionSyntaxError: If the text is not a valid expression
    """
    return _Parser(text).parse()


def demo() -> List[str]:
    expression = Subtract(Add(Number(5), Number(10)), Number(3))
    parsed = parse("100 - (20 + 5) - 5")
    return [
        f"Result: {expression.interpret()}",
        f"Parsed {parsed!r} = {parsed.interpret()}",
    ]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
