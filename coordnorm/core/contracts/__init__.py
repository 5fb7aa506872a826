"""
Contract Validation Module

Модуль для валидации JSON контрактов опций формата координат.
"""

from .validators import (
    ContractValidator,
    CoordinateFormatValidator,
    SchemaLoader,
    validate_coordinate_format,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoordinateFormatValidator",
    # Functions
    "validate_coordinate_format",
]
