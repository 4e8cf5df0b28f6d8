"""
Errors — Таксономия ошибок калькулятора

Все ошибки наследуются от CalculatorError и несут кортеж сообщений `messages`.

Два класса ошибок:
- Parse-time (operand/operator/format/notation) — накапливаются в Equation,
  наружу выходят одним EquationParseError со всеми сообщениями
- Evaluation-time (деление на ноль, Roman < 1) — терминальные, одно сообщение
"""

from enum import Enum


# =============================================================================
# СООБЩЕНИЯ
# =============================================================================

MSG_INPUT_MISSING = "equation is not provided"
MSG_INCORRECT_FORMAT = "equation has incorrect format"
MSG_INVALID_NUMERAL = "operand is not a valid Arabic or Roman number"
MSG_INVALID_OPERATOR = "operator is not supported"
MSG_NOTATION_MISMATCH = "cannot operate on numbers of different notations"
MSG_DIVISION_BY_ZERO = "division by zero"
MSG_ROMAN_RANGE = "Roman numerals must be >= 1"


# =============================================================================
# ENUMS
# =============================================================================


class OperandPosition(str, Enum):
    """Позиция операнда в уравнении"""

    FIRST = "first"
    SECOND = "second"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculatorError(Exception):
    """
    Базовая ошибка калькулятора.

    Хранит одно или несколько человекочитаемых сообщений.
    str(error) соединяет их через " :: ".
    """

    def __init__(self, *messages: str):
        if not messages:
            raise ValueError("CalculatorError requires at least one message")
        self.messages: tuple[str, ...] = tuple(messages)
        super().__init__(" :: ".join(self.messages))


class InputMissingError(CalculatorError):
    """Уравнение не передано (None)."""

    def __init__(self):
        super().__init__(MSG_INPUT_MISSING)


class FormatError(CalculatorError):
    """Уравнение не состоит ровно из трёх токенов."""

    def __init__(self):
        super().__init__(MSG_INCORRECT_FORMAT)


class NumeralParseError(CalculatorError):
    """Токен отсутствует в таблице чисел 0..10 (Arabic и Roman)."""

    def __init__(self, token: str, message: str = MSG_INVALID_NUMERAL):
        self.token = token
        super().__init__(message)


class OperandParseError(NumeralParseError):
    """
    NumeralParseError с контекстом позиции операнда.

    Сообщение: "<first|second> operand is not valid Arabic or Roman number".
    """

    def __init__(self, token: str, position: OperandPosition):
        self.position = position
        super().__init__(
            token, f"{position.value} operand is not valid Arabic or Roman number"
        )


class OperatorParseError(CalculatorError):
    """Символ оператора не входит в {+, -, *, /}."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(MSG_INVALID_OPERATOR)


class NotationMismatchError(CalculatorError):
    """Операнды записаны в разных нотациях (Arabic vs Roman)."""

    def __init__(self):
        super().__init__(MSG_NOTATION_MISMATCH)


class EquationParseError(CalculatorError):
    """
    Агрегат накопленных parse-time ошибок одного уравнения.

    `defects` — исходные ошибки в порядке обнаружения,
    `messages` — их сообщения подряд.
    """

    def __init__(self, *defects: CalculatorError):
        self.defects: tuple[CalculatorError, ...] = tuple(defects)
        super().__init__(*(message for defect in defects for message in defect.messages))


class DivisionByZeroError(CalculatorError):
    """Правый операнд деления равен нулю."""

    def __init__(self):
        super().__init__(MSG_DIVISION_BY_ZERO)


class RomanRangeViolation(CalculatorError):
    """
    Результат в Roman нотации меньше 1.

    Roman нотация не представляет ноль и отрицательные величины,
    поэтому результат отклоняется после вычисления.
    Arabic результаты этой проверке не подлежат.
    """

    def __init__(self, magnitude: int):
        self.magnitude = magnitude
        super().__init__(MSG_ROMAN_RANGE)
