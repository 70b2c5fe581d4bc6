"""
Text Codec — Разбор и форматирование десятичной записи

Грамматика:  ['-'] digit+ ['.' digit*]   (только ASCII-цифры)

Разбор является чисто лексической операцией: лишние дробные разряды по умолчанию
отбрасываются (TRUNCATE), не завися от политики округления арифметики.
Недостающие разряды дополняются нулями справа.

Форматирование (обратная операция):
    integer_part    = trunc(raw / SCALE_FACTOR)
    fractional_part = |raw| mod SCALE_FACTOR, ровно P разрядов
    префикс '-' при raw < 0; при P == 0 точка не выводится

КРИТИЧЕСКИЙ ИНВАРИАНТ:
    parse(format(v)) == v для любого валидного v
"""

import re
from enum import Enum
from typing import Final, Union

from fixeddec.core.errors import MalformedInput, Overflow
from fixeddec.core.math.rounding import DEFAULT_ROUNDING, RoundingPolicy, divide_rounded
from fixeddec.core.math.storage import StorageKind

_DECIMAL_RE: Final = re.compile(r"(-)?([0-9]+)(?:\.([0-9]*))?")


# =============================================================================
# ПОЛИТИКА ЛИШНИХ РАЗРЯДОВ
# =============================================================================


class ExcessDigits(str, Enum):
    """Обработка дробных разрядов сверх точности типа"""

    TRUNCATE = "truncate"
    ROUND = "round"
    REJECT = "reject"


DEFAULT_EXCESS_DIGITS: Final[ExcessDigits] = ExcessDigits.TRUNCATE


# =============================================================================
# PARSE
# =============================================================================


def _diagnose(text: str) -> str:
    """Причина несоответствия грамматике (для сообщения об ошибке)"""
    if text == "":
        return "empty input"
    if text == "-":
        return "sign without digits"
    if text.count(".") > 1:
        return f"multiple decimal points in {text!r}"

    body = text[1:] if text.startswith("-") else text
    if body.startswith("."):
        return f"missing integer digits in {text!r}"

    for position, char in enumerate(text):
        if char == "-" and position == 0:
            continue
        if char != "." and char not in "0123456789":
            return f"non-digit character {char!r} at position {position} in {text!r}"

    return f"invalid decimal literal {text!r}"


def parse_raw(
    text: str,
    precision: int,
    storage: StorageKind,
    excess: Union[ExcessDigits, str] = DEFAULT_EXCESS_DIGITS,
    rounding: RoundingPolicy = DEFAULT_ROUNDING,
) -> int:
    """
    Разбор десятичной строки в raw при заданной точности.

    Args:
        text: Десятичная запись ('-12.50', '3', '0.')
        precision: Число дробных разрядов целевого типа
        storage: Storage kind целевого типа
        excess: Обработка лишних дробных разрядов (default: TRUNCATE)
        rounding: Политика для excess=ROUND

    Returns:
        raw = значение * 10^precision

    Raises:
        TypeError: Если text не str
        MalformedInput: Если text не соответствует грамматике, или лишние
            ненулевые разряды при excess=REJECT
        Overflow: Если результат вне диапазона storage

    Examples:
        >>> from fixeddec.core.math.storage import U8
        >>> parse_raw("3.5", 1, U8)
        35
        >>> parse_raw("1.29", 1, U8)
        12
    """
    if not isinstance(text, str):
        raise TypeError(f"parse expects str, got {type(text).__name__}")
    excess = ExcessDigits(excess)

    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        raise MalformedInput(_diagnose(text))

    sign, integer_digits, fraction_digits = match.groups()
    fraction_digits = fraction_digits or ""
    integer_digits = integer_digits.lstrip("0") or "0"

    # Защита от гигантских строк до конверсии в int
    bound_digits = len(str(max(abs(storage.min_value), storage.max_value)))
    if len(integer_digits) > bound_digits:
        raise Overflow(f"parse: {text!r} does not fit in {storage.name}")

    kept = fraction_digits[:precision]
    dropped = fraction_digits[precision:]

    magnitude = int(integer_digits) * 10**precision + int(kept.ljust(precision, "0") or "0")
    raw = -magnitude if sign else magnitude

    if dropped.strip("0"):
        if excess is ExcessDigits.REJECT:
            raise MalformedInput(
                f"{text!r} has more than {precision} significant fractional digits"
            )
        if excess is ExcessDigits.ROUND:
            # Первый отброшенный разряд + sticky-разряд достаточны для любой политики
            sticky = "1" if dropped[1:].strip("0") else "0"
            full = int(integer_digits + kept.ljust(precision, "0") + dropped[0] + sticky)
            raw = divide_rounded(-full if sign else full, 100, rounding)

    return storage.checked(raw, "parse")


# =============================================================================
# FORMAT
# =============================================================================


def format_raw(raw: int, precision: int) -> str:
    """
    Каноническая десятичная запись raw при заданной точности.

    Examples:
        >>> format_raw(12345, 2)
        '123.45'
        >>> format_raw(-5, 1)
        '-0.5'
        >>> format_raw(42, 0)
        '42'
    """
    integer_part, fractional_part = divmod(abs(raw), 10**precision)
    sign = "-" if raw < 0 else ""

    if precision == 0:
        return f"{sign}{integer_part}"
    return f"{sign}{integer_part}.{fractional_part:0{precision}d}"
