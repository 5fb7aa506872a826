"""
coordnorm — нормализация координат Gerber/NC-drill файлов.

Переводит токены координат (с десятичной точкой или без неё) в десятичные
числа в 1000x исходной единицы для последующего рендеринга.
"""

from coordnorm.core.domain import (
    CoordinateFailure,
    CoordinateFormat,
    CoordinateNormalizationError,
    LeadingSuppressedFormat,
    TrailingSuppressedFormat,
    UnsetFormat,
    ZeroSuppression,
    format_from_options,
)
from coordnorm.core.math import (
    COORD_E,
    NOT_A_NUMBER,
    CoordNormalizer,
    NormalizerConfig,
    NormalizeResult,
    is_not_a_number,
    normalize_coord,
    normalize_coord_strict,
)

__version__ = "0.1.0"

__all__ = [
    "COORD_E",
    "NOT_A_NUMBER",
    "CoordNormalizer",
    "CoordinateFailure",
    "CoordinateFormat",
    "CoordinateNormalizationError",
    "LeadingSuppressedFormat",
    "NormalizeResult",
    "NormalizerConfig",
    "TrailingSuppressedFormat",
    "UnsetFormat",
    "ZeroSuppression",
    "format_from_options",
    "is_not_a_number",
    "normalize_coord",
    "normalize_coord_strict",
]
