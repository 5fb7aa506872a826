"""
Domain models and value objects.

Contains the coordinate format variants and the failure taxonomy.
"""

from coordnorm.core.domain.coord_format import (
    CoordinateFormat,
    LeadingSuppressedFormat,
    TrailingSuppressedFormat,
    UnsetFormat,
    ZeroSuppression,
    format_from_options,
    format_to_options,
)
from coordnorm.core.domain.failures import (
    AmbiguousFormatError,
    CoordinateFailure,
    CoordinateNormalizationError,
    InvalidPlacesError,
    MalformedTokenError,
    MissingInputError,
    NonNumericResidueError,
    UnknownZeroModeError,
)

__all__ = [
    # Coordinate format
    "ZeroSuppression",
    "UnsetFormat",
    "TrailingSuppressedFormat",
    "LeadingSuppressedFormat",
    "CoordinateFormat",
    "format_from_options",
    "format_to_options",
    # Failures
    "CoordinateFailure",
    "CoordinateNormalizationError",
    "MissingInputError",
    "MalformedTokenError",
    "InvalidPlacesError",
    "AmbiguousFormatError",
    "UnknownZeroModeError",
    "NonNumericResidueError",
]
