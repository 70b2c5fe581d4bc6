"""
fixeddec — десятичные числа с фиксированной точкой на целочисленном хранении

    >>> from fixeddec import FixedValue, U8
    >>> Tenths = FixedValue[U8, 1]
    >>> str(Tenths.from_integer(12) + Tenths.parse("3.5"))
    '15.5'
"""

# Errors
from fixeddec.core.errors import (
    CodecError,
    DivisionByZero,
    FixedDecError,
    MalformedInput,
    Overflow,
)

# Storage kinds & rounding
from fixeddec.core.math import (
    DEFAULT_ROUNDING,
    I8,
    I16,
    I32,
    I64,
    I128,
    STORAGE_KINDS,
    U8,
    U16,
    U32,
    U64,
    U128,
    RoundingPolicy,
    StorageKind,
    divide_rounded,
    storage_kind,
)

# Codec
from fixeddec.core.codec import (
    DEFAULT_EXCESS_DIGITS,
    ExcessDigits,
    format_raw,
    parse_raw,
)

# Value type, record, constants
from fixeddec.core.domain import (
    PI32,
    PI64,
    PI128,
    FixedValue,
    FixedValueRecord,
    fixed_type,
)

# Contracts
from fixeddec.core.contracts import validate_fixed_value_record

__all__ = [
    # Errors
    "CodecError",
    "DivisionByZero",
    "FixedDecError",
    "MalformedInput",
    "Overflow",
    # Storage kinds
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "STORAGE_KINDS",
    "StorageKind",
    "storage_kind",
    # Rounding
    "DEFAULT_ROUNDING",
    "RoundingPolicy",
    "divide_rounded",
    # Codec
    "DEFAULT_EXCESS_DIGITS",
    "ExcessDigits",
    "format_raw",
    "parse_raw",
    # Value type
    "FixedValue",
    "fixed_type",
    "FixedValueRecord",
    # Constants
    "PI32",
    "PI64",
    "PI128",
    # Contracts
    "validate_fixed_value_record",
]
