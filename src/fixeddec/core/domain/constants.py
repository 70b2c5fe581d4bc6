"""
Constants — Предопределённые fixed-point константы

π с максимальной точностью, которую допускает каждый unsigned storage kind:
- PI128: u128, 38 дробных разрядов
- PI64:  u64, 18 дробных разрядов
- PI32:  u32, 9 дробных разрядов

Более короткие представления получаются сужением:
    PI64.convert(2, RoundingPolicy.TRUNCATE)  →  3.14
"""

from typing import Final

from fixeddec.core.domain.fixed_value import FixedValue
from fixeddec.core.math.storage import U32, U64, U128

_PI_128_DIGITS: Final[int] = 3_141_592_653_589_793_238_462_643_383_279_502_884_19
_PI_64_DIGITS: Final[int] = 3_141_592_653_589_793_238
_PI_32_DIGITS: Final[int] = 3_141_592_653

PI128: Final[FixedValue] = FixedValue[U128, 38].from_raw(_PI_128_DIGITS)
PI64: Final[FixedValue] = FixedValue[U64, 18].from_raw(_PI_64_DIGITS)
PI32: Final[FixedValue] = FixedValue[U32, 9].from_raw(_PI_32_DIGITS)
