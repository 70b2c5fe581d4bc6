"""
Fixed Value Record Contract

Проверка формы переносимой записи FixedValueRecord по JSON Schema
(contracts/schema/fixed_value_record.json, Draft 2020-12).

Схема проверяет только структуру: допустимое имя storage, диапазон
точности и грамматику десятичной строки. Диапазон storage и
представимость точности проверяет сама модель FixedValueRecord.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

SCHEMA_DIR: Path = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы из SCHEMA_DIR (кэшируется).

    Raises:
        FileNotFoundError: Схема отсутствует
        ValueError: Файл не является валидной Draft 2020-12 схемой
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


# =============================================================================
# RECORD VALIDATOR
# =============================================================================


class FixedValueRecordValidator:
    """Валидатор сериализованной FixedValueRecord"""

    SCHEMA_NAME = "fixed_value_record"

    def __init__(self) -> None:
        self.schema = load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое (наиболее релевантное) нарушение
        """
        error = best_match(self._validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def errors(self, data: Dict[str, Any]) -> List[Tuple[str, str]]:
        """
        Все нарушения как пары (JSON path, сообщение), упорядоченные по пути.

        >>> FixedValueRecordValidator().errors({"storage": "i8", "precision": 1, "value": "1"})
        []
        """
        found = [(error.json_path, error.message) for error in self._validator.iter_errors(data)]
        return sorted(found)


def validate_fixed_value_record(data: Dict[str, Any]) -> None:
    """
    Валидация fixed_value_record данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    FixedValueRecordValidator().validate(data)
