"""
FixedValue — Десятичное число с фиксированной точкой

Значение хранится как целое raw; представляемое число = raw / 10^P.
Storage kind (ширина/знаковость) и точность P фиксированы на уровне типа:

    Price = FixedValue[I64, 4]
    p = Price.parse("101.2500")

Конкретный тип создаётся один раз и кэшируется, поэтому FixedValue[I64, 4]
всегда возвращает тот же класс. Значения разных конкретных типов нельзя
складывать, сравнивать на порядок и т.д. без явного convert()/cast().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. raw всегда в диапазоне STORAGE
2. SCALE_FACTOR = 10^PRECISION представим в STORAGE (проверяется при создании типа)
3. Экземпляры immutable: любая операция возвращает новое значение
4. Смешение разных конкретных типов → TypeError
"""

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Any, ClassVar, Optional, Tuple, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from fixeddec.core.codec.text import (
    DEFAULT_EXCESS_DIGITS,
    ExcessDigits,
    format_raw,
    parse_raw,
)
from fixeddec.core.errors import FixedDecError
from fixeddec.core.math.arithmetic import div_raw, mul_raw, rescale_raw, round_raw_at
from fixeddec.core.math.rounding import DEFAULT_ROUNDING, RoundingPolicy, divide_rounded
from fixeddec.core.math.storage import StorageKind, storage_kind

logger = logging.getLogger(__name__)

StorageSpec = Union[StorageKind, str]


# =============================================================================
# СОЗДАНИЕ КОНКРЕТНЫХ ТИПОВ
# =============================================================================


def _resolve_storage(storage: StorageSpec) -> StorageKind:
    if isinstance(storage, StorageKind):
        return storage
    if isinstance(storage, str):
        return storage_kind(storage)
    raise TypeError(f"storage must be StorageKind or str, got {type(storage).__name__}")


@lru_cache(maxsize=None)
def _define_type(storage: StorageKind, precision: int) -> type:
    scale = storage.ten_power(precision)
    if scale is None:
        raise ValueError(
            f"precision {precision} is not representable in {storage.name}: "
            f"10^{precision} exceeds {storage.max_value}"
        )

    name = f"FixedValue[{storage.name}, {precision}]"
    cls = type(
        name,
        (FixedValue,),
        {
            "__slots__": (),
            "__qualname__": name,
            "__module__": FixedValue.__module__,
            "STORAGE": storage,
            "PRECISION": precision,
            "SCALE_FACTOR": scale,
        },
    )
    logger.debug("Defined fixed type %s (scale factor %d)", name, scale)
    return cls


def fixed_type(storage: StorageSpec, precision: int) -> type:
    """
    Конкретный FixedValue-тип для пары (storage, precision).

    Args:
        storage: StorageKind или его имя ('i32', 'u8', ...)
        precision: Число дробных десятичных разрядов (>= 0)

    Returns:
        Кэшированный подкласс FixedValue

    Raises:
        TypeError: Если precision не int
        ValueError: Если precision < 0 или 10^precision не помещается в storage
    """
    kind = _resolve_storage(storage)
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be int, got {type(precision).__name__}")
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return _define_type(kind, precision)


def _restore(storage_name: str, precision: int, raw: int) -> "FixedValue":
    """Восстановление значения при unpickle"""
    return fixed_type(storage_name, precision).from_raw(raw)


# =============================================================================
# FIXED VALUE
# =============================================================================


class FixedValue:
    """
    Fixed-point десятичное значение.

    Базовый класс обобщённый: экземпляры создаются только у конкретных
    типов FixedValue[storage, precision].
    """

    __slots__ = ("_raw",)

    STORAGE: ClassVar[Optional[StorageKind]] = None
    PRECISION: ClassVar[int] = 0
    SCALE_FACTOR: ClassVar[int] = 1

    def __class_getitem__(cls, params: Tuple[StorageSpec, int]) -> type:
        if cls.STORAGE is not None:
            raise TypeError(f"{cls.__name__} is already a concrete fixed type")
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("FixedValue[...] expects exactly two parameters: storage, precision")
        storage, precision = params
        return fixed_type(storage, precision)

    def __init__(self, raw: int):
        cls = type(self)
        if cls.STORAGE is None:
            raise TypeError(
                "FixedValue is generic; use a concrete type, e.g. FixedValue[I32, 2]"
            )
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"raw must be int, got {type(raw).__name__}")
        object.__setattr__(self, "_raw", cls.STORAGE.checked(raw, "from_raw"))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_restore, (self.STORAGE.name, self.PRECISION, self._raw))

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def from_raw(cls, raw: int) -> "FixedValue":
        """
        Значение из уже масштабированного raw.

        >>> FixedValue["u32", 3].from_raw(1_234).format()
        '1.234'
        """
        return cls(raw)

    @classmethod
    def from_integer(cls, n: int) -> "FixedValue":
        """
        Значение из целой части: raw = n * SCALE_FACTOR.

        Raises:
            Overflow: Если n * SCALE_FACTOR вне диапазона storage
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"from_integer expects int, got {type(n).__name__}")
        return cls(cls.STORAGE.checked(n * cls.SCALE_FACTOR, "from_integer"))

    @classmethod
    def zero(cls) -> "FixedValue":
        return cls(0)

    @classmethod
    def one(cls) -> "FixedValue":
        return cls(cls.SCALE_FACTOR)

    @classmethod
    def min_value(cls) -> "FixedValue":
        return cls(cls.STORAGE.min_value)

    @classmethod
    def max_value(cls) -> "FixedValue":
        return cls(cls.STORAGE.max_value)

    @classmethod
    def parse(
        cls,
        text: str,
        excess: Union[ExcessDigits, str] = DEFAULT_EXCESS_DIGITS,
        rounding: RoundingPolicy = DEFAULT_ROUNDING,
    ) -> "FixedValue":
        """
        Разбор десятичной строки.

        Args:
            text: Запись вида ['-'] digit+ ['.' digit*]
            excess: Лишние дробные разряды: TRUNCATE (default), ROUND, REJECT
            rounding: Политика для excess=ROUND

        Raises:
            MalformedInput: Текст не соответствует грамматике
            Overflow: Значение вне диапазона storage
        """
        return cls(parse_raw(text, cls.PRECISION, cls.STORAGE, excess, rounding))

    # -------------------------------------------------------------------------
    # Доступ к представлению
    # -------------------------------------------------------------------------

    @property
    def raw(self) -> int:
        """Хранимое целое (значение * SCALE_FACTOR)"""
        return self._raw

    def to_integer(self) -> int:
        """Целая часть с усечением к нулю; никогда не падает"""
        return divide_rounded(self._raw, self.SCALE_FACTOR, RoundingPolicy.TRUNCATE)

    def integral(self) -> int:
        return self.to_integer()

    def fractional(self) -> int:
        """
        Дробная часть как целое без знака.

        >>> FixedValue["i32", 3].from_raw(-1_234).fractional()
        234
        """
        return abs(self._raw) % self.SCALE_FACTOR

    def to_decimal(self) -> Decimal:
        """Точное представление в виде decimal.Decimal"""
        return Decimal(self._raw).scaleb(-self.PRECISION)

    def is_zero(self) -> bool:
        return self._raw == 0

    def is_negative(self) -> bool:
        return self._raw < 0

    def format(self) -> str:
        return format_raw(self._raw, self.PRECISION)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.format()!r})"

    def __bool__(self) -> bool:
        return self._raw != 0

    # -------------------------------------------------------------------------
    # Проверка совместимости типов
    # -------------------------------------------------------------------------

    def _require_same_type(self, other: Any, operation: str) -> None:
        if type(other) is not type(self):
            other_name = type(other).__name__
            raise TypeError(
                f"{operation}: cannot combine {type(self).__name__} with {other_name}; "
                f"convert explicitly first"
            )

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "FixedValue") -> "FixedValue":
        """
        Сумма значений одного типа.

        Raises:
            TypeError: Разные конкретные типы
            Overflow: Сумма вне диапазона storage
        """
        self._require_same_type(other, "add")
        return type(self)(self.STORAGE.checked_add(self._raw, other._raw))

    def sub(self, other: "FixedValue") -> "FixedValue":
        """Разность; для unsigned storage отрицательный результат → Overflow"""
        self._require_same_type(other, "sub")
        return type(self)(self.STORAGE.checked_sub(self._raw, other._raw))

    def mul(
        self, other: "FixedValue", rounding: RoundingPolicy = DEFAULT_ROUNDING
    ) -> "FixedValue":
        """
        Произведение с rescale обратно к PRECISION.

        Промежуточное a.raw * b.raw вычисляется в widened kind, затем
        делится на SCALE_FACTOR с политикой rounding.

        Raises:
            TypeError: Разные конкретные типы
            Overflow: Результат вне диапазона storage
        """
        self._require_same_type(other, "mul")
        return type(self)(
            mul_raw(self._raw, other._raw, self.SCALE_FACTOR, self.STORAGE, rounding)
        )

    def div(
        self, other: "FixedValue", rounding: RoundingPolicy = DEFAULT_ROUNDING
    ) -> "FixedValue":
        """
        Частное: round(a.raw * SCALE_FACTOR / b.raw).

        Raises:
            TypeError: Разные конкретные типы
            DivisionByZero: other.raw == 0
            Overflow: Результат вне диапазона storage
        """
        self._require_same_type(other, "div")
        return type(self)(
            div_raw(self._raw, other._raw, self.SCALE_FACTOR, self.STORAGE, rounding)
        )

    def neg(self) -> "FixedValue":
        """
        Смена знака.

        Overflow для минимума signed storage и для любого ненулевого
        значения unsigned storage.
        """
        return type(self)(self.STORAGE.checked_neg(self._raw))

    def abs(self) -> "FixedValue":
        if self._raw < 0:
            return self.neg()
        return self

    def mul_int(self, n: int) -> "FixedValue":
        """Умножение на целый скаляр (точно, без rescale)"""
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"mul_int expects int, got {type(n).__name__}")
        return type(self)(self.STORAGE.checked_mul(self._raw, n))

    def div_int(self, n: int, rounding: RoundingPolicy = DEFAULT_ROUNDING) -> "FixedValue":
        """
        Деление на целый скаляр с политикой rounding.

        Raises:
            DivisionByZero: n == 0
            Overflow: Результат вне диапазона (i8 min / -1)
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"div_int expects int, got {type(n).__name__}")
        return type(self)(
            self.STORAGE.checked(divide_rounded(self._raw, n, rounding), "div_int")
        )

    def round_at(
        self, digits: int, rounding: RoundingPolicy = DEFAULT_ROUNDING
    ) -> "FixedValue":
        """
        Округление до digits дробных разрядов с сохранением типа.

        >>> FixedValue["u32", 3].from_raw(1_234).round_at(2).raw
        1230
        """
        return type(self)(
            round_raw_at(self._raw, self.PRECISION, digits, self.STORAGE, rounding)
        )

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def convert(
        self, precision: int, rounding: RoundingPolicy = DEFAULT_ROUNDING
    ) -> "FixedValue":
        """
        Перевод в тип FixedValue[STORAGE, precision].

        Расширение точности точное (Overflow при выходе за диапазон),
        сужение округляет отброшенные разряды политикой rounding.

        Raises:
            ValueError: 10^precision не помещается в storage
            Overflow: Расширение выходит за диапазон storage
        """
        target = fixed_type(self.STORAGE, precision)
        return target(
            rescale_raw(self._raw, self.PRECISION, precision, self.STORAGE, rounding)
        )

    def cast(self, storage: StorageSpec) -> "FixedValue":
        """
        Перевод в другой storage kind с той же точностью.

        Raises:
            ValueError: PRECISION не представима в новом storage
            Overflow: raw не помещается в новый storage
        """
        target = fixed_type(storage, self.PRECISION)
        return target(target.STORAGE.checked(self._raw, "cast"))

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: "FixedValue") -> bool:
        self._require_same_type(other, "equals")
        return self._raw == other._raw

    def compare(self, other: "FixedValue") -> int:
        """
        Полный порядок для значений одного типа.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        self._require_same_type(other, "compare")
        return (self._raw > other._raw) - (self._raw < other._raw)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw

    def __ne__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._raw != other._raw

    def __hash__(self) -> int:
        return hash((self.STORAGE, self.PRECISION, self._raw))

    def __lt__(self, other: "FixedValue") -> bool:
        if not isinstance(other, FixedValue):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "FixedValue") -> bool:
        if not isinstance(other, FixedValue):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "FixedValue") -> bool:
        if not isinstance(other, FixedValue):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "FixedValue") -> bool:
        if not isinstance(other, FixedValue):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "FixedValue") -> "FixedValue":
        if not isinstance(other, FixedValue):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "FixedValue") -> "FixedValue":
        if not isinstance(other, FixedValue):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Union["FixedValue", int]) -> "FixedValue":
        if isinstance(other, FixedValue):
            return self.mul(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.mul_int(other)
        return NotImplemented

    def __rmul__(self, other: int) -> "FixedValue":
        if isinstance(other, int) and not isinstance(other, bool):
            return self.mul_int(other)
        return NotImplemented

    def __truediv__(self, other: Union["FixedValue", int]) -> "FixedValue":
        if isinstance(other, FixedValue):
            return self.div(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.div_int(other)
        return NotImplemented

    def __neg__(self) -> "FixedValue":
        return self.neg()

    def __pos__(self) -> "FixedValue":
        return self

    def __abs__(self) -> "FixedValue":
        return self.abs()

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> "FixedValue":
        """Приведение входа pydantic-поля к конкретному типу"""
        if isinstance(value, cls):
            return value
        if isinstance(value, FixedValue):
            raise ValueError(
                f"expected {cls.__name__}, got {type(value).__name__}; convert explicitly first"
            )
        try:
            if isinstance(value, str):
                return cls.parse(value, excess=ExcessDigits.REJECT)
            if isinstance(value, int) and not isinstance(value, bool):
                return cls.from_integer(value)
        except FixedDecError as e:
            raise ValueError(str(e)) from e
        raise ValueError(f"expected {cls.__name__}, str or int, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        serialization = core_schema.plain_serializer_function_ser_schema(
            lambda value: value.format()
        )
        if cls.STORAGE is None:
            return core_schema.is_instance_schema(FixedValue, serialization=serialization)
        return core_schema.no_info_plain_validator_function(
            cls._validate, serialization=serialization
        )
