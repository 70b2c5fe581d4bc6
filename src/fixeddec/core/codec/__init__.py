"""
Text codec: разбор и форматирование десятичной записи.
"""

from fixeddec.core.codec.text import (
    DEFAULT_EXCESS_DIGITS,
    ExcessDigits,
    format_raw,
    parse_raw,
)

__all__ = [
    "DEFAULT_EXCESS_DIGITS",
    "ExcessDigits",
    "format_raw",
    "parse_raw",
]
