"""
NumeralValue — Число с нотацией (Arabic / Roman)

Immutable Pydantic модель: величина (magnitude) + нотация, в которой число
было записано. Нотация сохраняется при арифметике (берётся от левого операнда).

Разбор — точный lookup по фиксированной таблице 0..10. Таблица одновременно
является и парсером, и валидатором: некорректные формы ("IIII", "VV", "IC")
отсутствуют в таблице и отклоняются без отдельных правил.

Рендеринг Roman выполняется кодировщиком src.core.math.roman, который
покрывает диапазон до 100 (результат 10 × 10 не ограничивается повторно).
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from pydantic import BaseModel, Field

from src.core.domain.errors import NumeralParseError
from src.core.domain.operator import Operator
from src.core.math.roman import encode_roman


# =============================================================================
# ENUMS
# =============================================================================


class Notation(str, Enum):
    """Система счисления, в которой записано число"""

    ARABIC = "arabic"
    ROMAN = "roman"


# =============================================================================
# ТАБЛИЦЫ 0..10
# =============================================================================

NUMERAL_MIN: Final[int] = 0
NUMERAL_MAX: Final[int] = 10

ARABIC_NUMERALS: Final[Mapping[str, int]] = MappingProxyType(
    {str(value): value for value in range(NUMERAL_MIN, NUMERAL_MAX + 1)}
)

# Ноль в римской записи — пустая строка
ROMAN_NUMERALS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "": 0,
        "I": 1,
        "II": 2,
        "III": 3,
        "IV": 4,
        "V": 5,
        "VI": 6,
        "VII": 7,
        "VIII": 8,
        "IX": 9,
        "X": 10,
    }
)


# =============================================================================
# NUMERAL VALUE MODEL
# =============================================================================


class NumeralValue(BaseModel):
    """
    Величина с нотацией.

    Immutable модель (frozen=True). Создаётся только через parse() или
    арифметику над существующими значениями.

    magnitude не ограничивается диапазоном 0..10: результаты операций
    могут быть отрицательными (Arabic) или достигать 100 (умножение).
    """

    magnitude: int = Field(..., strict=True, description="Целочисленная величина")
    notation: Notation = Field(..., strict=True, description="Нотация записи (arabic/roman)")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, token: str) -> "NumeralValue":
        """
        Разбор токена по таблицам Arabic и Roman.

        Регистр не важен: токен приводится к верхнему регистру.

        Args:
            token: Строка операнда (например, "7", "VII", "vii")

        Returns:
            NumeralValue с найденной величиной и нотацией

        Raises:
            NumeralParseError: Если токена нет ни в одной таблице
        """
        normalized = token.upper()

        if normalized in ARABIC_NUMERALS:
            return cls(magnitude=ARABIC_NUMERALS[normalized], notation=Notation.ARABIC)

        if normalized in ROMAN_NUMERALS:
            return cls(magnitude=ROMAN_NUMERALS[normalized], notation=Notation.ROMAN)

        raise NumeralParseError(token)

    def render(self) -> str:
        """
        Текстовое представление в собственной нотации.

        Roman 0 рендерится как пустая строка (соответствует нулевой
        записи таблицы).
        """
        if self.notation == Notation.ARABIC:
            return str(self.magnitude)
        return encode_roman(self.magnitude)

    def combine(self, other: "NumeralValue", operator: Operator) -> "NumeralValue":
        """
        Арифметика над двумя значениями.

        Нотация результата всегда берётся от ЛЕВОГО операнда (self);
        нотация правого операнда отбрасывается.

        Raises:
            DivisionByZeroError: DIV при other.magnitude == 0
        """
        magnitude = operator.apply(self.magnitude, other.magnitude)
        return NumeralValue(magnitude=magnitude, notation=self.notation)

    def add(self, other: "NumeralValue") -> "NumeralValue":
        return self.combine(other, Operator.ADD)

    def sub(self, other: "NumeralValue") -> "NumeralValue":
        return self.combine(other, Operator.SUB)

    def mul(self, other: "NumeralValue") -> "NumeralValue":
        return self.combine(other, Operator.MUL)

    def div(self, other: "NumeralValue") -> "NumeralValue":
        return self.combine(other, Operator.DIV)

    def __str__(self) -> str:
        return self.render()
