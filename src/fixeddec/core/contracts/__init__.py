"""
Contract Validation Module

Валидация JSON контрактов пакета fixeddec.
"""

from .validators import (
    SCHEMA_DIR,
    FixedValueRecordValidator,
    load_schema,
    validate_fixed_value_record,
)

__all__ = [
    # Classes
    "FixedValueRecordValidator",
    # Functions
    "load_schema",
    "validate_fixed_value_record",
    # Constants
    "SCHEMA_DIR",
]
