"""
Domain models and value objects.

Contains the FixedValue type, its portable record form and predefined constants.
"""

from fixeddec.core.domain.fixed_value import FixedValue, fixed_type
from fixeddec.core.domain.record import FixedValueRecord
from fixeddec.core.domain.constants import PI32, PI64, PI128

__all__ = [
    # Value type
    "FixedValue",
    "fixed_type",
    # Record
    "FixedValueRecord",
    # Constants
    "PI32",
    "PI64",
    "PI128",
]
