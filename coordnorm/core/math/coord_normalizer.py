"""
Coordinate Normalizer — нормализация координат Gerber/NC-drill

Модуль переводит токен координаты из Gerber/drill файла в десятичное число,
выраженное в 1000x исходной единицы (экспонента масштаба COORD_E = 3).

Gerber/drill форматы разрешают опускать десятичную точку: тогда положение
точки восстанавливается из формата (количество разрядов до/после точки и
тип подавления нулей).

АЛГОРИТМ:
    1. None → MISSING_INPUT, иначе текст токена без экспоненты
    2. Ведущий '+'/'-' запоминается как знак и отрезается
    3. Разбиение на before/after:
       - по десятичной точке, если она есть или zero не задан
       - по формату: T — первые leading символов, L — последние trailing
    4. after дополняется нулями справа до COORD_E,
       целая часть = before + after[:E], остаток = '.' + after[E:]
    5. sign + целая часть + остаток → float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Чистая функция: нет состояния, входы не изменяются, потокобезопасно
2. Токен с десятичной точкой нормализуется независимо от формата
3. Мягкий путь никогда не бросает исключений, отказ → NaN
4. Строгий путь бросает типизированные CoordinateNormalizationError
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final, NamedTuple

from coordnorm.core.domain.coord_format import (
    CoordinateFormat,
    LeadingSuppressedFormat,
    TrailingSuppressedFormat,
    UnsetFormat,
    format_from_options,
)
from coordnorm.core.domain.failures import (
    CoordinateFailure,
    CoordinateNormalizationError,
    MalformedTokenError,
    MissingInputError,
    NonNumericResidueError,
    UnknownZeroModeError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Экспонента масштаба: выходная координата = 10**COORD_E * исходная единица
COORD_E: Final[int] = 3

# Sentinel отказа мягкого пути
NOT_A_NUMBER: Final[float] = math.nan

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

CoordToken = str | int | float | Decimal | None
FormatSource = CoordinateFormat | Mapping[str, Any] | None


# =============================================================================
# TYPES
# =============================================================================


class CoordDigits(NamedTuple):
    """Токен, разбитый на знак, целые и дробные цифры (до масштабирования)"""

    sign: str
    before: str
    after: str


@dataclass(frozen=True)
class NormalizeResult:
    """Результат нормализации одной координаты."""

    ok: bool
    value: float  # NOT_A_NUMBER при отказе

    failure: CoordinateFailure | None

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NormalizerConfig:
    """Конфигурация нормализатора.

    scale_exponent=3 соответствует SVG-координатам в 1000x единицы файла.
    """

    scale_exponent: int = COORD_E

    def __post_init__(self) -> None:
        if isinstance(self.scale_exponent, bool) or not isinstance(self.scale_exponent, int):
            raise ValueError(f"scale_exponent must be an int, got {self.scale_exponent!r}")
        if self.scale_exponent < 0:
            raise ValueError(f"scale_exponent must be non-negative, got {self.scale_exponent}")


# =============================================================================
# SPLITTING
# =============================================================================


def split_coord(token: CoordToken, fmt: FormatSource = None) -> CoordDigits:
    """
    Разбиение токена на знак, цифры целой части и цифры дробной части.

    Формат разрешается лениво: если в токене есть десятичная точка,
    формат не читается и не валидируется.

    Args:
        token: Токен координаты ('-0125', '1.5', 2.25, ...)
        fmt: Модель формата, словарь опций или None

    Returns:
        CoordDigits(sign, before, after)

    Raises:
        MissingInputError: token is None
        MalformedTokenError: больше одной десятичной точки
        AmbiguousFormatError, InvalidPlacesError, UnknownZeroModeError:
            формат нужен для разбиения, но некорректен

    Examples:
        >>> split_coord('-1234', {'zero': 'T', 'places': [2, 2]})
        CoordDigits(sign='-', before='12', after='34')
        >>> split_coord('1.5')
        CoordDigits(sign='+', before='1', after='5')
    """
    if token is None:
        raise MissingInputError("Coordinate token is missing")

    body = _token_text(token)
    sign = "+"
    if body[:1] in ("+", "-"):
        sign = body[0]
        body = body[1:]

    if "." in body:
        before, after = _split_on_decimal_point(body)
        return CoordDigits(sign, before, after)

    resolved = format_from_options(fmt)

    if isinstance(resolved, UnsetFormat):
        return CoordDigits(sign, body, "")

    if isinstance(resolved, TrailingSuppressedFormat):
        leading = resolved.leading
        before = body[:leading]
        after = body[leading:]
        # явные цифры идут первыми, недостающие разряды целой части — нули справа
        before += "0" * (leading - len(before))
        return CoordDigits(sign, before, after)

    if isinstance(resolved, LeadingSuppressedFormat):
        trailing = resolved.trailing
        cut = max(len(body) - trailing, 0)
        before = body[:cut]
        after = body[cut:]
        after = "0" * (trailing - len(after)) + after
        return CoordDigits(sign, before, after)

    raise UnknownZeroModeError(f"Unsupported coordinate format: {resolved!r}")


def _token_text(token: str | int | float | Decimal) -> str:
    """
    Текстовое представление токена без экспоненциальной записи.

    float и Decimal печатаются обычными цифрами (5e-05 → '0.00005'),
    NaN/Inf остаются как есть и отвергаются как нецифровые символы.
    """
    if isinstance(token, float) and math.isfinite(token):
        return format(Decimal(repr(token)), "f")
    if isinstance(token, Decimal) and token.is_finite():
        return format(token, "f")
    return str(token)


def _split_on_decimal_point(body: str) -> tuple[str, str]:
    if body.count(".") > 1:
        raise MalformedTokenError(f"Coordinate has more than one decimal point: {body!r}")
    before, _, after = body.partition(".")
    return before, after


# =============================================================================
# NORMALIZER
# =============================================================================


class CoordNormalizer:
    """Нормализатор координат Gerber/NC-drill.

    Не хранит состояния кроме конфигурации, поэтому один экземпляр можно
    использовать из нескольких потоков.

    Точки входа:
    1. normalize — мягкий путь, отказ → NOT_A_NUMBER
    2. normalize_strict — строгий путь, отказ → CoordinateNormalizationError
    3. evaluate — NormalizeResult с причиной отказа
    """

    def __init__(self, config: NormalizerConfig | None = None):
        """Инициализация нормализатора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or NormalizerConfig()

    def normalize(self, token: CoordToken, fmt: FormatSource = None) -> float:
        """Нормализация координаты; при любой ошибке возвращает NOT_A_NUMBER."""
        return self.evaluate(token, fmt).value

    def normalize_strict(self, token: CoordToken, fmt: FormatSource = None) -> float:
        """
        Нормализация координаты с типизированными ошибками.

        Args:
            token: Токен координаты
            fmt: Модель формата, словарь опций или None

        Returns:
            Координата в 10**scale_exponent исходных единицах

        Raises:
            CoordinateNormalizationError: подкласс по причине отказа
        """
        digits = split_coord(token, fmt)
        return self._rescale(digits)

    def evaluate(self, token: CoordToken, fmt: FormatSource = None) -> NormalizeResult:
        """
        Нормализация координаты с разбором причины отказа.

        Returns:
            NormalizeResult(ok, value, failure, details)
        """
        try:
            value = self.normalize_strict(token, fmt)
        except CoordinateNormalizationError as e:
            logger.debug("Coordinate %r rejected (%s): %s", token, e.kind.value, e)
            return NormalizeResult(
                ok=False,
                value=NOT_A_NUMBER,
                failure=e.kind,
                details=str(e),
            )

        return NormalizeResult(ok=True, value=value, failure=None, details="")

    def _rescale(self, digits: CoordDigits) -> float:
        """Перенос десятичной точки на scale_exponent разрядов вправо и парсинг."""
        exponent = self.config.scale_exponent
        before = digits.before
        after = digits.after

        if not _is_digit_string(before) or not _is_digit_string(after):
            raise NonNumericResidueError(
                f"Coordinate contains non-digit characters: {before!r}.{after!r}"
            )

        after += "0" * (exponent - len(after))
        # при scale_exponent=0 и пустом before целая часть пуста
        integer_part = (before + after[:exponent]) or "0"
        remainder = "." + after[exponent:] if len(after) > exponent else ""

        return float(digits.sign + integer_part + remainder)


def _is_digit_string(value: str) -> bool:
    """Только ASCII-цифры (пустая строка допустима)"""
    return all(c in _DIGITS for c in value)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_NORMALIZER = CoordNormalizer()


def normalize_coord(token: CoordToken, fmt: FormatSource = None) -> float:
    """
    Нормализация координаты в 1000x исходной единицы.

    Args:
        token: Токен координаты
        fmt: Модель формата, словарь опций или None

    Returns:
        Нормализованная координата или NOT_A_NUMBER

    Examples:
        >>> normalize_coord('1234', {'zero': 'L', 'places': [2, 2]})
        12340.0
        >>> normalize_coord('1.5', {})
        1500.0
        >>> normalize_coord('1.2.3', {})
        nan
    """
    return _DEFAULT_NORMALIZER.normalize(token, fmt)


def normalize_coord_strict(token: CoordToken, fmt: FormatSource = None) -> float:
    """
    Нормализация координаты в 1000x исходной единицы.

    Raises:
        CoordinateNormalizationError: подкласс по причине отказа
    """
    return _DEFAULT_NORMALIZER.normalize_strict(token, fmt)


def is_not_a_number(value: float) -> bool:
    """Проверка результата normalize_coord на sentinel отказа"""
    return math.isnan(value)
