"""Evaluate — внешняя граница калькулятора

Единственная точка входа для внешней оболочки (консоль, REPL и т.п.):
строка уравнения → EvaluationResult (значение или список ошибок).

calculate() — та же цепочка в exception-стиле: возвращает строку
или бросает CalculatorError.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import structlog

from src.calculator.equation import Equation
from src.core.domain import CalculatorError


# stdlib logger underneath: without host configuration debug/info go nowhere
logger = structlog.wrap_logger(logging.getLogger(__name__))


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора."""

    # Разделитель сообщений при нескольких ошибках
    error_delimiter: str = " :: "


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления одной строки."""

    ok: bool
    value: Optional[str]
    errors: tuple[str, ...]

    # Сообщения об ошибках, соединённые разделителем ("" при успехе)
    message: str


# =============================================================================
# EVALUATE
# =============================================================================


def evaluate(text: Optional[str], config: Optional[CalculatorConfig] = None) -> EvaluationResult:
    """Вычисление строки уравнения без исключений на пользовательский ввод.

    Args:
        text: строка вида "<OPERAND> <OPERATOR> <OPERAND>"
        config: конфигурация (опционально, используется default)

    Returns:
        EvaluationResult: ok=True и value при успехе,
        ok=False и errors/message при ошибке
    """
    config = config or CalculatorConfig()

    try:
        value = calculate(text)
    except CalculatorError as e:
        logger.info("Equation rejected", equation=text, errors=list(e.messages))
        return EvaluationResult(
            ok=False,
            value=None,
            errors=e.messages,
            message=config.error_delimiter.join(e.messages),
        )

    return EvaluationResult(ok=True, value=value, errors=(), message="")


def calculate(text: Optional[str]) -> str:
    """Вычисление строки уравнения.

    Returns:
        Результат в нотации левого операнда

    Raises:
        EquationParseError: ошибки разбора (все накопленные сообщения)
        DivisionByZeroError: деление на ноль
        RomanRangeViolation: Roman результат < 1
    """
    result = Equation.parse(text).evaluate()
    rendered = result.render()

    logger.debug(
        "Equation evaluated",
        equation=text,
        magnitude=result.magnitude,
        notation=result.notation.value,
        result=rendered,
    )
    return rendered
