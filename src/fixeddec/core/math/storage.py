"""
Storage Kinds — Таблица целочисленных типов хранения

Каждый FixedValue хранит raw как Python int, ограниченный диапазоном
конкретного storage kind (ширина в битах + знаковость). Storage kind
предоставляет набор checked-операций: результат либо в диапазоне,
либо Overflow.

Доступные kinds: i8, i16, i32, i64, i128, u8, u16, u32, u64, u128.

Для промежуточных вычислений mul/div используется widen(): kind двойной
ширины той же знаковости. В него гарантированно помещается произведение
двух raw и raw * SCALE_FACTOR.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Final, Optional

from fixeddec.core.errors import Overflow
from fixeddec.core.math.rounding import RoundingPolicy, divide_rounded

logger = logging.getLogger(__name__)


# =============================================================================
# STORAGE KIND
# =============================================================================


@dataclass(frozen=True)
class StorageKind:
    """
    Целочисленный тип хранения фиксированной ширины.

    Immutable (frozen=True) и hashable: используется как часть
    идентичности конкретного FixedValue-типа.
    """

    name: str
    bits: int
    signed: bool

    def __post_init__(self):
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")

    def __str__(self) -> str:
        return self.name

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение"""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение"""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что value помещается в диапазон"""
        return self.min_value <= value <= self.max_value

    def checked(self, value: int, operation: str = "value") -> int:
        """
        Проверка диапазона результата операции.

        Args:
            value: Вычисленный результат (точный Python int)
            operation: Имя операции для сообщения об ошибке

        Returns:
            value без изменений

        Raises:
            Overflow: Если value вне [min_value, max_value]
        """
        if not self.contains(value):
            logger.debug(
                "%s overflow: %d outside [%d, %d] for %s",
                operation,
                value,
                self.min_value,
                self.max_value,
                self.name,
            )
            raise Overflow(
                f"{operation}: result {value} does not fit in {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value

    # -------------------------------------------------------------------------
    # Checked-арифметика
    # -------------------------------------------------------------------------

    def checked_add(self, a: int, b: int) -> int:
        return self.checked(a + b, "add")

    def checked_sub(self, a: int, b: int) -> int:
        return self.checked(a - b, "sub")

    def checked_mul(self, a: int, b: int) -> int:
        return self.checked(a * b, "mul")

    def checked_div(self, a: int, b: int) -> int:
        """Деление с усечением к нулю (i8: -128 / -1 → Overflow)"""
        return self.checked(divide_rounded(a, b, RoundingPolicy.TRUNCATE), "div")

    def checked_neg(self, a: int) -> int:
        return self.checked(-a, "neg")

    def ten_power(self, exponent: int) -> Optional[int]:
        """
        10 ** exponent, если помещается в диапазон, иначе None.

        Args:
            exponent: Неотрицательная степень

        Returns:
            10 ** exponent или None
        """
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        if exponent >= len(str(self.max_value)):
            return None
        power = 10**exponent
        if power > self.max_value:
            return None
        return power

    def widen(self) -> "StorageKind":
        """Kind двойной ширины для промежуточных вычислений"""
        bits = self.bits * 2
        prefix = "i" if self.signed else "u"
        return StorageKind(name=f"{prefix}{bits}", bits=bits, signed=self.signed)


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ KINDS
# =============================================================================

I8: Final[StorageKind] = StorageKind("i8", 8, True)
I16: Final[StorageKind] = StorageKind("i16", 16, True)
I32: Final[StorageKind] = StorageKind("i32", 32, True)
I64: Final[StorageKind] = StorageKind("i64", 64, True)
I128: Final[StorageKind] = StorageKind("i128", 128, True)
U8: Final[StorageKind] = StorageKind("u8", 8, False)
U16: Final[StorageKind] = StorageKind("u16", 16, False)
U32: Final[StorageKind] = StorageKind("u32", 32, False)
U64: Final[StorageKind] = StorageKind("u64", 64, False)
U128: Final[StorageKind] = StorageKind("u128", 128, False)

STORAGE_KINDS: Final[Dict[str, StorageKind]] = {
    kind.name: kind for kind in (I8, I16, I32, I64, I128, U8, U16, U32, U64, U128)
}


def storage_kind(name: str) -> StorageKind:
    """
    Поиск storage kind по имени.

    Args:
        name: Имя kind (например, 'i32', 'u8')

    Returns:
        Соответствующий StorageKind

    Raises:
        ValueError: Если имя неизвестно
    """
    try:
        return STORAGE_KINDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown storage kind {name!r}, expected one of {sorted(STORAGE_KINDS)}"
        ) from None
