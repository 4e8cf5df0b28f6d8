"""
Operator — Бинарные арифметические операторы

Закрытое перечисление {+, -, *, /}. Stateless.
"""

from enum import Enum

from src.core.domain.errors import DivisionByZeroError, OperatorParseError


class Operator(str, Enum):
    """Арифметический оператор; value — символ в записи уравнения"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @classmethod
    def parse(cls, symbol: str) -> "Operator":
        """
        Разбор символа оператора (точное совпадение).

        Raises:
            OperatorParseError: Если символ не поддерживается
        """
        try:
            return cls(symbol)
        except ValueError:
            raise OperatorParseError(symbol) from None

    def apply(self, left: int, right: int) -> int:
        """
        Целочисленная операция над величинами.

        Деление усекается к нулю (не floor), как в целочисленной арифметике.

        Raises:
            DivisionByZeroError: DIV с right == 0
        """
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUB:
            return left - right
        if self is Operator.MUL:
            return left * right

        if right == 0:
            raise DivisionByZeroError()
        quotient = abs(left) // abs(right)
        return quotient if (left >= 0) == (right >= 0) else -quotient
