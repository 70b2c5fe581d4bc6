"""
Rounding — Единая политика округления при делении целых

Все потери информации (rescale после умножения, деление, сужение точности,
round_at) проходят через одну функцию divide_rounded. Политика выбирается
один раз и применяется единообразно; по умолчанию round-half-away-from-zero.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда целый, вычисляется без float
2. При нулевом остатке политика не влияет на результат
3. Деление на ноль → DivisionByZero (никогда не fallback)
"""

import logging
from enum import Enum
from typing import Final, Union

from fixeddec.core.errors import DivisionByZero

logger = logging.getLogger(__name__)


# =============================================================================
# ПОЛИТИКИ ОКРУГЛЕНИЯ
# =============================================================================


class RoundingPolicy(str, Enum):
    """Правило разрешения отброшенного остатка"""

    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_EVEN = "half_even"
    TRUNCATE = "truncate"
    FLOOR = "floor"
    CEILING = "ceiling"


# Политика для mul/div/convert/round_at, если не указана явно
DEFAULT_ROUNDING: Final[RoundingPolicy] = RoundingPolicy.HALF_AWAY_FROM_ZERO


# =============================================================================
# ДЕЛЕНИЕ С ОКРУГЛЕНИЕМ
# =============================================================================


def divide_rounded(
    numerator: int,
    denominator: int,
    policy: Union[RoundingPolicy, str] = DEFAULT_ROUNDING,
) -> int:
    """
    Целочисленное деление с заданной политикой округления.

    Частное считается по модулям, затем остаток разрешается политикой
    и восстанавливается знак. Это даёт симметричное поведение для
    отрицательных операндов (в отличие от встроенного //, который
    округляет к минус бесконечности).

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)
        policy: Политика округления (default: HALF_AWAY_FROM_ZERO)

    Returns:
        Округлённое частное

    Raises:
        DivisionByZero: Если denominator == 0
        ValueError: Если policy неизвестна

    Examples:
        >>> divide_rounded(25, 10)
        3
        >>> divide_rounded(-25, 10)
        -3
        >>> divide_rounded(25, 10, RoundingPolicy.HALF_EVEN)
        2
        >>> divide_rounded(-29, 10, RoundingPolicy.TRUNCATE)
        -2
    """
    policy = RoundingPolicy(policy)

    if denominator == 0:
        logger.debug("divide_rounded: division by zero (numerator=%d)", numerator)
        raise DivisionByZero(f"Division by zero: {numerator} / 0")

    negative = (numerator < 0) != (denominator < 0)
    divisor = abs(denominator)
    quotient, remainder = divmod(abs(numerator), divisor)

    if remainder:
        if policy is RoundingPolicy.HALF_AWAY_FROM_ZERO:
            if 2 * remainder >= divisor:
                quotient += 1
        elif policy is RoundingPolicy.HALF_EVEN:
            twice = 2 * remainder
            if twice > divisor or (twice == divisor and quotient % 2 == 1):
                quotient += 1
        elif policy is RoundingPolicy.FLOOR:
            # По модулю: для отрицательного частного floor уводит от нуля
            if negative:
                quotient += 1
        elif policy is RoundingPolicy.CEILING:
            if not negative:
                quotient += 1
        # TRUNCATE: остаток отбрасывается

    return -quotient if negative else quotient
