"""
Core math modules

Чистые функции над целыми величинами, без зависимости от домена.
"""

# Roman Encoding
from src.core.math.roman import (
    ROMAN_ENCODE_MAX,
    ROMAN_SYMBOLS,
    encode_roman,
)

__all__ = [
    "ROMAN_ENCODE_MAX",
    "ROMAN_SYMBOLS",
    "encode_roman",
]
