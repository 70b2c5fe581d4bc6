"""
Arithmetic — Fixed-point операции на уровне raw

Функции работают над raw-целыми и параметрами типа (storage, scale),
не зная о классе FixedValue. FixedValue делегирует сюда всю арифметику.

ФОРМУЛЫ:
    add:  raw = a + b
    mul:  raw = round(a * b / SCALE_FACTOR)
    div:  raw = round(a * SCALE_FACTOR / b)
    rescale (P → Q, Q > P):  raw = raw * 10^(Q - P)          (точно)
    rescale (P → Q, Q < P):  raw = round(raw / 10^(P - Q))   (с потерей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточное произведение проверяется в widened kind (двойная ширина)
2. Финальный результат проверяется в исходном storage kind
3. Все округления выполняются через divide_rounded
"""

import logging

from fixeddec.core.errors import DivisionByZero
from fixeddec.core.math.rounding import DEFAULT_ROUNDING, RoundingPolicy, divide_rounded
from fixeddec.core.math.storage import StorageKind

logger = logging.getLogger(__name__)


def mul_raw(
    a: int,
    b: int,
    scale: int,
    storage: StorageKind,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> int:
    """
    Произведение двух fixed-point raw одинаковой точности.

    Логическое произведение имеет точность 2P; rescale к P выполняется
    делением на scale с политикой rounding.

    Raises:
        Overflow: Если округлённый результат не помещается в storage
    """
    product = storage.widen().checked(a * b, "mul (widened)")
    return storage.checked(divide_rounded(product, scale, rounding), "mul")


def div_raw(
    a: int,
    b: int,
    scale: int,
    storage: StorageKind,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> int:
    """
    Частное двух fixed-point raw одинаковой точности.

    Числитель предварительно масштабируется на scale в widened kind,
    чтобы сохранить P дробных разрядов частного.

    Raises:
        DivisionByZero: Если b == 0
        Overflow: Если числитель или результат вне диапазона
    """
    if b == 0:
        logger.debug("div: division by zero (dividend raw=%d)", a)
        raise DivisionByZero(f"div: divisor raw is zero (dividend raw={a})")

    numerator = storage.widen().checked(a * scale, "div (widened)")
    return storage.checked(divide_rounded(numerator, b, rounding), "div")


def rescale_raw(
    raw: int,
    from_precision: int,
    to_precision: int,
    storage: StorageKind,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> int:
    """
    Перевод raw из одной точности в другую.

    Args:
        raw: Исходное raw при точности from_precision
        from_precision: Текущее число дробных разрядов
        to_precision: Целевое число дробных разрядов
        storage: Storage kind (одинаковый для обеих точностей)
        rounding: Политика для сужения (при расширении не используется)

    Returns:
        raw при точности to_precision

    Raises:
        Overflow: Если расширение выходит за диапазон storage

    Examples:
        >>> from fixeddec.core.math.storage import I32
        >>> rescale_raw(12345, 2, 0, I32)
        123
        >>> rescale_raw(123, 0, 2, I32)
        12300
    """
    if to_precision == from_precision:
        return raw

    if to_precision > from_precision:
        factor = 10 ** (to_precision - from_precision)
        return storage.checked(raw * factor, "convert")

    divisor = 10 ** (from_precision - to_precision)
    return storage.checked(divide_rounded(raw, divisor, rounding), "convert")


def round_raw_at(
    raw: int,
    precision: int,
    digits: int,
    storage: StorageKind,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> int:
    """
    Округление raw до digits дробных разрядов без смены точности.

    Разряды после digits обнуляются. При digits >= precision raw
    возвращается без изменений.

    Raises:
        ValueError: Если digits < 0
        Overflow: Если округление вверх выходит за диапазон storage

    Examples:
        >>> from fixeddec.core.math.storage import U32
        >>> round_raw_at(1234, 3, 2, U32, RoundingPolicy.TRUNCATE)
        1230
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    if digits >= precision:
        return raw

    step = 10 ** (precision - digits)
    return storage.checked(divide_rounded(raw, step, rounding) * step, "round_at")
