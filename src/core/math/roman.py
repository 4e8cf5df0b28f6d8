"""
Roman Encoding — жадное кодирование целого числа в римскую запись

Алфавит ограничен C..I: входные операнды не превышают 10,
максимальный результат арифметики — 10 × 10 = 100.

Алгоритм: пока остаток > 0, вычитаем наибольшее значение из таблицы
и дописываем его символ. Для [1, 100] даёт каноническую (минимальную)
subtractive-запись.
"""

from typing import Final


# =============================================================================
# ТАБЛИЦА СИМВОЛОВ
# =============================================================================

# По убыванию значения, включая subtractive пары
ROMAN_SYMBOLS: Final[tuple[tuple[str, int], ...]] = (
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)

ROMAN_ENCODE_MAX: Final[int] = 100


# =============================================================================
# ENCODER
# =============================================================================


def encode_roman(value: int) -> str:
    """
    Конверсия целого числа в римскую запись.

    Args:
        value: Неотрицательное целое

    Returns:
        Римская запись; для 0 — пустая строка

    Raises:
        ValueError: Если value отрицательное

    Examples:
        >>> encode_roman(14)
        'XIV'
        >>> encode_roman(100)
        'C'
        >>> encode_roman(0)
        ''
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value as Roman numeral: {value}")

    result = []
    remainder = value
    for symbol, weight in ROMAN_SYMBOLS:
        while remainder >= weight:
            result.append(symbol)
            remainder -= weight

    return "".join(result)
