"""
CoordinateFormat — формат записи координат Gerber/NC-drill

Immutable Pydantic модели, описывающие, как интерпретировать строку цифр
без десятичной точки. Соответствует команде %FS Gerber-файла
(например, %FSLAX24Y24*%) и заголовку INCH,TZ / METRIC,LZ drill-файла.

Формат — это tagged variant:
- UnsetFormat: подавление нулей не задано, допустимы только токены
  с десятичной точкой или без подавления нулей
- TrailingSuppressedFormat: подавлены хвостовые нули (T), явные цифры идут первыми
- LeadingSuppressedFormat: подавлены ведущие нули (L), явные цифры идут последними

Формат валидируется один раз при создании, а не при каждой нормализации.
Свободный словарь опций от парсера файлов приводится к модели через
format_from_options.
"""

import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from coordnorm.core.domain.failures import (
    AmbiguousFormatError,
    InvalidPlacesError,
    UnknownZeroModeError,
)


def _is_integral_number(value: Any) -> bool:
    """Конечное целое число: int или целый float, bool не считается числом"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value) and value.is_integer()


# =============================================================================
# ENUMS
# =============================================================================


class ZeroSuppression(str, Enum):
    """Тип подавления нулей"""

    TRAILING = "T"
    LEADING = "L"


# =============================================================================
# FORMAT MODELS
# =============================================================================


class UnsetFormat(BaseModel):
    """
    Формат без подавления нулей.

    Токен делится только по десятичной точке; токен без точки трактуется
    как целое число исходных единиц.
    """

    zero: ClassVar[None] = None

    model_config = {"frozen": True}


class _SuppressedFormat(BaseModel):
    """
    Общая часть форматов с подавлением нулей: количество разрядов
    до и после десятичной точки.
    """

    zero: ClassVar[ZeroSuppression]

    leading: int = Field(..., ge=0, description="Количество разрядов целой части")
    trailing: int = Field(..., ge=0, description="Количество разрядов дробной части")

    model_config = {"frozen": True}

    @field_validator("leading", "trailing", mode="before")
    @classmethod
    def validate_digit_count(cls, v: Any) -> Any:
        """Количество разрядов — конечное целое число (bool и строки не допускаются)"""
        if not _is_integral_number(v):
            raise ValueError(f"digit count must be a finite integral number, got {v!r}")
        return int(v)

    @property
    def places(self) -> tuple[int, int]:
        """(leading, trailing) в порядке записи в %FS"""
        return (self.leading, self.trailing)


class TrailingSuppressedFormat(_SuppressedFormat):
    """Подавлены хвостовые нули: первые leading символов — целая часть"""

    zero: ClassVar[ZeroSuppression] = ZeroSuppression.TRAILING


class LeadingSuppressedFormat(_SuppressedFormat):
    """Подавлены ведущие нули: последние trailing символов — дробная часть"""

    zero: ClassVar[ZeroSuppression] = ZeroSuppression.LEADING


CoordinateFormat = UnsetFormat | TrailingSuppressedFormat | LeadingSuppressedFormat

_SUPPRESSED_FORMATS: dict[ZeroSuppression, type[_SuppressedFormat]] = {
    ZeroSuppression.TRAILING: TrailingSuppressedFormat,
    ZeroSuppression.LEADING: LeadingSuppressedFormat,
}


# =============================================================================
# OPTIONS BAG CONVERSION
# =============================================================================


def format_from_options(
    options: CoordinateFormat | Mapping[str, Any] | None,
) -> CoordinateFormat:
    """
    Приведение свободного словаря опций к модели формата.

    Args:
        options: {"zero": "T"|"L"|None, "places": [leading, trailing]},
            готовая модель формата или None

    Returns:
        UnsetFormat, TrailingSuppressedFormat или LeadingSuppressedFormat

    Raises:
        UnknownZeroModeError: zero не равен 'T', 'L' или None
        AmbiguousFormatError: zero задан, а places отсутствует
        InvalidPlacesError: places не пара конечных неотрицательных целых

    Examples:
        >>> format_from_options({"zero": "L", "places": [2, 4]})
        LeadingSuppressedFormat(leading=2, trailing=4)
        >>> format_from_options({})
        UnsetFormat()
    """
    if isinstance(options, CoordinateFormat):
        return options
    if options is None:
        return UnsetFormat()
    if not isinstance(options, Mapping):
        raise UnknownZeroModeError(
            f"Coordinate format must be a mapping or a format model, got {type(options).__name__}"
        )

    zero = options.get("zero")
    if zero is None:
        # places без zero ни на что не влияют
        return UnsetFormat()

    try:
        mode = ZeroSuppression(zero)
    except ValueError:
        raise UnknownZeroModeError(f"Unknown zero suppression mode: {zero!r}") from None

    places = options.get("places")
    if places is None:
        raise AmbiguousFormatError(
            f"Zero suppression {mode.value!r} requires places [leading, trailing]"
        )
    if isinstance(places, (str, bytes)) or not isinstance(places, Sequence) or len(places) != 2:
        raise InvalidPlacesError(f"places must be a pair [leading, trailing], got {places!r}")

    leading, trailing = places
    try:
        return _SUPPRESSED_FORMATS[mode](leading=leading, trailing=trailing)
    except ValidationError as e:
        raise InvalidPlacesError(f"Invalid places {places!r}: {e}") from e


def format_to_options(fmt: CoordinateFormat) -> dict[str, Any]:
    """
    Обратное преобразование модели формата в словарь опций.

    Returns:
        {"zero": None} или {"zero": "T"|"L", "places": [leading, trailing]}
    """
    if isinstance(fmt, UnsetFormat):
        return {"zero": None}
    return {"zero": fmt.zero.value, "places": list(fmt.places)}
