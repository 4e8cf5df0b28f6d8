"""Equation — разбор и вычисление бинарного уравнения

Формат строки: `<OPERAND> <OPERATOR> <OPERAND>`, разделитель — одиночный пробел.

Разбор накапливает ошибки (accumulated-error parsing): три слота
(левый операнд, оператор, правый операнд) разбираются независимо,
так что одна строка может вернуть несколько сообщений сразу.

Порядок проверок:
1. None → "equation is not provided" (стоп)
2. Токенов ≠ 3 → "equation has incorrect format" (стоп)
3. Первый операнд
4. Оператор
5. Второй операнд
6. Совпадение нотаций (только если оба операнда разобраны)
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain import (
    CalculatorError,
    EquationParseError,
    FormatError,
    InputMissingError,
    Notation,
    NotationMismatchError,
    NumeralParseError,
    NumeralValue,
    OperandParseError,
    OperandPosition,
    Operator,
    OperatorParseError,
    RomanRangeViolation,
)


# =============================================================================
# CONSTANTS
# =============================================================================

EQUATION_TOKEN_COUNT = 3
TOKEN_SEPARATOR = " "


# =============================================================================
# EQUATION
# =============================================================================


@dataclass(frozen=True)
class Equation:
    """Результат разбора одной строки уравнения."""

    left: Optional[NumeralValue]
    operator: Optional[Operator]
    right: Optional[NumeralValue]

    # Накопленные ошибки разбора в порядке обнаружения (пусто → валидно)
    defects: tuple[CalculatorError, ...] = ()

    @property
    def errors(self) -> tuple[str, ...]:
        """Сообщения всех накопленных ошибок."""
        return tuple(message for defect in self.defects for message in defect.messages)

    @property
    def is_valid(self) -> bool:
        return not self.defects

    @classmethod
    def parse(cls, line: Optional[str]) -> "Equation":
        """Разбор строки уравнения с накоплением ошибок.

        Не бросает исключений на некорректный ввод: все дефекты
        попадают в `defects` / `errors`.

        Args:
            line: строка уравнения (может быть None)

        Returns:
            Equation; при ошибках — с непустым `defects`
        """
        if line is None:
            return cls(left=None, operator=None, right=None, defects=(InputMissingError(),))

        tokens = line.strip().upper().split(TOKEN_SEPARATOR)
        if len(tokens) != EQUATION_TOKEN_COUNT:
            return cls(left=None, operator=None, right=None, defects=(FormatError(),))

        defects: list[CalculatorError] = []

        left = _parse_operand(tokens[0], OperandPosition.FIRST, defects)

        operator = None
        try:
            operator = Operator.parse(tokens[1])
        except OperatorParseError as e:
            defects.append(e)

        right = _parse_operand(tokens[2], OperandPosition.SECOND, defects)

        if left is not None and right is not None and left.notation != right.notation:
            defects.append(NotationMismatchError())

        return cls(left=left, operator=operator, right=right, defects=tuple(defects))

    def evaluate(self) -> NumeralValue:
        """Вычисление уравнения.

        Returns:
            NumeralValue в нотации левого операнда

        Raises:
            EquationParseError: уравнение содержит ошибки разбора
            DivisionByZeroError: деление на ноль
            RomanRangeViolation: Roman результат < 1
        """
        if not self.is_valid:
            raise EquationParseError(*self.defects)

        result = self.left.combine(self.right, self.operator)

        if result.notation == Notation.ROMAN and result.magnitude < 1:
            raise RomanRangeViolation(result.magnitude)

        return result


def _parse_operand(
    token: str, position: OperandPosition, defects: list[CalculatorError]
) -> Optional[NumeralValue]:
    """Разбор операнда; при ошибке дописывает позиционную ошибку в defects."""
    try:
        return NumeralValue.parse(token)
    except NumeralParseError:
        defects.append(OperandParseError(token, position))
        return None
