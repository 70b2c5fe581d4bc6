"""
FixedValueRecord — Самоописывающая переносимая форма значения

Immutable Pydantic модель: storage kind, точность и каноническая
десятичная строка. Запись без потерь: при восстановлении лишние
ненулевые дробные разряды отвергаются, а не усекаются.

Соответствует схеме contracts/schema/fixed_value_record.json.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from fixeddec.core.codec.text import ExcessDigits
from fixeddec.core.domain.fixed_value import FixedValue, fixed_type
from fixeddec.core.errors import FixedDecError
from fixeddec.core.math.storage import storage_kind


class FixedValueRecord(BaseModel):
    """
    Переносимое представление FixedValue.

    Immutable модель (frozen=True): запись является снимком значения.
    """

    storage: str = Field(..., description="Storage kind (например, 'i64')")
    precision: int = Field(..., ge=0, description="Число дробных десятичных разрядов")
    value: str = Field(..., min_length=1, description="Десятичная запись значения")

    model_config = {"frozen": True}

    @field_validator("storage")
    @classmethod
    def validate_storage(cls, v: str) -> str:
        """Storage kind должен быть из таблицы STORAGE_KINDS"""
        storage_kind(v)
        return v

    @model_validator(mode="after")
    def validate_value(self) -> "FixedValueRecord":
        """
        Проверка, что запись восстанавливается в значение без потерь.

        Ошибки codec и недопустимая точность превращаются в ValueError,
        чтобы pydantic сообщил их как ValidationError.
        """
        try:
            self.to_value()
        except FixedDecError as e:
            raise ValueError(str(e)) from e
        return self

    @classmethod
    def from_value(cls, value: FixedValue) -> "FixedValueRecord":
        """Запись для конкретного значения"""
        if not isinstance(value, FixedValue):
            raise TypeError(f"expected FixedValue, got {type(value).__name__}")
        return cls(
            storage=value.STORAGE.name,
            precision=value.PRECISION,
            value=value.format(),
        )

    def to_value(self) -> FixedValue:
        """
        Восстановление значения.

        Raises:
            ValueError: Точность не представима в storage
            MalformedInput: value не соответствует грамматике или теряет разряды
            Overflow: value вне диапазона storage
        """
        cls = fixed_type(self.storage, self.precision)
        return cls.parse(self.value, excess=ExcessDigits.REJECT)
