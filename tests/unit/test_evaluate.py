"""
Тесты для внешней границы калькулятора: evaluate / calculate

Покрытие:
- Успешные вычисления (Arabic / Roman)
- Все виды ошибок как EvaluationResult (без исключений)
- Разделитель сообщений из CalculatorConfig
- calculate: exception-стиль
- Логирование отклонённых уравнений
"""

import pytest
from structlog.testing import capture_logs

from src.calculator import CalculatorConfig, EvaluationResult, calculate, evaluate
from src.core.domain import (
    MSG_DIVISION_BY_ZERO,
    MSG_INCORRECT_FORMAT,
    MSG_INPUT_MISSING,
    MSG_INVALID_OPERATOR,
    MSG_NOTATION_MISMATCH,
    MSG_ROMAN_RANGE,
    CalculatorError,
    DivisionByZeroError,
    EquationParseError,
    RomanRangeViolation,
)


# =============================================================================
# ТЕСТЫ: успешные вычисления
# =============================================================================


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5 + 3", "8"),
        ("V + III", "VIII"),
        ("X * II", "XX"),
        ("10 * 2", "20"),
        ("x * x", "C"),
        ("VII / II", "III"),
        ("ix - i", "VIII"),
        ("3 - 8", "-5"),
        ("0 * 7", "0"),
        ("1 / 10", "0"),
    ],
)
def test_evaluate_success(text, expected):
    result = evaluate(text)

    assert result == EvaluationResult(ok=True, value=expected, errors=(), message="")


# =============================================================================
# ТЕСТЫ: ошибки
# =============================================================================


class TestEvaluateErrors:
    """Ошибки возвращаются в результате, а не бросаются."""

    @pytest.mark.parametrize(
        "text, expected_errors",
        [
            (None, (MSG_INPUT_MISSING,)),
            ("", (MSG_INCORRECT_FORMAT,)),
            ("5 +  3", (MSG_INCORRECT_FORMAT,)),
            ("5 & 3", (MSG_INVALID_OPERATOR,)),
            ("5 + III", (MSG_NOTATION_MISMATCH,)),
            ("5 / 0", (MSG_DIVISION_BY_ZERO,)),
            ("V - X", (MSG_ROMAN_RANGE,)),
        ],
    )
    def test_single_error(self, text, expected_errors):
        result = evaluate(text)

        assert result.ok is False
        assert result.value is None
        assert result.errors == expected_errors
        assert result.message == expected_errors[0]

    def test_multiple_errors_joined(self):
        result = evaluate("foo bar baz")

        assert result.ok is False
        assert len(result.errors) == 3
        assert result.message == (
            "first operand is not valid Arabic or Roman number"
            " :: operator is not supported"
            " :: second operand is not valid Arabic or Roman number"
        )

    def test_custom_delimiter(self):
        result = evaluate("XII ^ 4", CalculatorConfig(error_delimiter="; "))

        assert result.message == (
            "first operand is not valid Arabic or Roman number; operator is not supported"
        )


# =============================================================================
# ТЕСТЫ: calculate (exception-стиль)
# =============================================================================


class TestCalculate:
    """calculate бросает CalculatorError вместо результата с ошибками."""

    def test_success(self):
        assert calculate("iv * ii") == "VIII"

    def test_parse_errors_aggregated(self):
        with pytest.raises(EquationParseError) as exc_info:
            calculate("foo bar baz")

        assert len(exc_info.value.messages) == 3
        assert isinstance(exc_info.value, CalculatorError)

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            calculate("10 / 0")

    def test_roman_range(self):
        with pytest.raises(RomanRangeViolation):
            calculate("III - III")

    def test_error_str_joins_messages(self):
        with pytest.raises(CalculatorError, match="operator is not supported :: "):
            calculate("foo bar baz")


# =============================================================================
# ТЕСТЫ: логирование
# =============================================================================


def test_rejected_equation_logged():
    with capture_logs() as logs:
        evaluate("5 & 3")

    rejected = [entry for entry in logs if entry["event"] == "Equation rejected"]
    assert len(rejected) == 1
    assert rejected[0]["log_level"] == "info"
    assert rejected[0]["errors"] == [MSG_INVALID_OPERATOR]
    assert rejected[0]["equation"] == "5 & 3"


def test_evaluated_equation_logged():
    with capture_logs() as logs:
        evaluate("V + III")

    evaluated = [entry for entry in logs if entry["event"] == "Equation evaluated"]
    assert len(evaluated) == 1
    assert evaluated[0]["log_level"] == "debug"
    assert evaluated[0]["equation"] == "V + III"
    assert evaluated[0]["magnitude"] == 8
    assert evaluated[0]["notation"] == "roman"
    assert evaluated[0]["result"] == "VIII"


def test_unconfigured_logging_keeps_stdout_clean(capsys):
    """Без настройки логирования у хоста события не попадают в stdout."""
    evaluate("5 + 3")
    evaluate("5 & 3")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
