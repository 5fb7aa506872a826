"""
Core math modules для coordnorm

Нормализация координат с фиксированной экспонентой масштаба.
"""

# Coordinate Normalizer
from coordnorm.core.math.coord_normalizer import (
    COORD_E,
    NOT_A_NUMBER,
    CoordDigits,
    CoordNormalizer,
    NormalizeResult,
    NormalizerConfig,
    is_not_a_number,
    normalize_coord,
    normalize_coord_strict,
    split_coord,
)

__all__ = [
    # Constants
    "COORD_E",
    "NOT_A_NUMBER",
    # Types
    "CoordDigits",
    "NormalizeResult",
    "NormalizerConfig",
    "CoordNormalizer",
    # Functions
    "split_coord",
    "normalize_coord",
    "normalize_coord_strict",
    "is_not_a_number",
]
