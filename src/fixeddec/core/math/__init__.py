"""
Core math modules для fixeddec

Целочисленные примитивы: storage kinds, политика округления,
fixed-point арифметика на уровне raw.
"""

# Rounding
from fixeddec.core.math.rounding import (
    DEFAULT_ROUNDING,
    RoundingPolicy,
    divide_rounded,
)

# Storage kinds
from fixeddec.core.math.storage import (
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
    StorageKind,
    storage_kind,
)

# Raw arithmetic
from fixeddec.core.math.arithmetic import (
    div_raw,
    mul_raw,
    rescale_raw,
    round_raw_at,
)

__all__ = [
    # Rounding
    "DEFAULT_ROUNDING",
    "RoundingPolicy",
    "divide_rounded",
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
    # Raw arithmetic
    "div_raw",
    "mul_raw",
    "rescale_raw",
    "round_raw_at",
]
