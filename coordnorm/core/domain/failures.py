"""
Failures — таксономия ошибок нормализации координат

Все ошибки нормализации описываются одним из значений CoordinateFailure.
Мягкий (lenient) путь сворачивает их в sentinel NaN, строгий (strict) путь
поднимает соответствующее исключение.

Иерархия исключений:
    CoordinateNormalizationError (ValueError)
    ├── MissingInputError
    ├── MalformedTokenError
    ├── InvalidPlacesError
    │   └── AmbiguousFormatError
    ├── UnknownZeroModeError
    └── NonNumericResidueError
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class CoordinateFailure(str, Enum):
    """Причина отказа в нормализации координаты"""

    MISSING_INPUT = "missing_input"
    MALFORMED_TOKEN = "malformed_token"
    AMBIGUOUS_FORMAT = "ambiguous_format"
    INVALID_PLACES = "invalid_places"
    UNKNOWN_ZERO_MODE = "unknown_zero_mode"
    NON_NUMERIC_RESIDUE = "non_numeric_residue"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CoordinateNormalizationError(ValueError):
    """
    Базовое исключение нормализации координаты.

    Атрибут kind позволяет вызывающему коду различать причины отказа,
    не перечисляя все подклассы.
    """

    kind: CoordinateFailure


class MissingInputError(CoordinateNormalizationError):
    """Токен координаты отсутствует (None)"""

    kind = CoordinateFailure.MISSING_INPUT


class MalformedTokenError(CoordinateNormalizationError):
    """В токене больше одной десятичной точки"""

    kind = CoordinateFailure.MALFORMED_TOKEN


class InvalidPlacesError(CoordinateNormalizationError):
    """places имеет неверную длину или содержит не целое/не конечное значение"""

    kind = CoordinateFailure.INVALID_PLACES


class AmbiguousFormatError(InvalidPlacesError):
    """
    Подавление нулей задано, но places отсутствует.

    Токен без десятичной точки невозможно разделить на целую и дробную часть.
    """

    kind = CoordinateFailure.AMBIGUOUS_FORMAT


class UnknownZeroModeError(CoordinateNormalizationError):
    """zero не равен 'T', 'L' или None"""

    kind = CoordinateFailure.UNKNOWN_ZERO_MODE


class NonNumericResidueError(CoordinateNormalizationError):
    """После разбора в токене остались символы, не являющиеся цифрами"""

    kind = CoordinateFailure.NON_NUMERIC_RESIDUE
