"""Local request validation, one pure function per endpoint.

Each validator returns either a normalized copy of its params (selectors
coerced to their enumeration members, integral numbers coerced to ``int``)
or the first :class:`~randomorg_client.results.ValidationError` found.
Validators never raise and never touch the network.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Any, TypeVar

from randomorg_client.params import (
    GAUSSIAN_LIMIT,
    INTEGER_LIMIT,
    MAX_BITMAP_SIDE,
    MAX_COUNT,
    MAX_DECIMALS,
    MAX_SEQUENCE_LENGTH,
    MAX_STRING_LENGTH,
    MIN_BITMAP_SIDE,
    MIN_COUNT,
    MIN_DECIMALS,
    MIN_STRING_LENGTH,
    BitmapFormat,
    BitmapParams,
    ByteFormat,
    ByteParams,
    DecimalFractionParams,
    GaussianParams,
    IntegerBase,
    IntegerParams,
    SequenceParams,
    StringParams,
)
from randomorg_client.persistence import bitmap_target
from randomorg_client.results import ValidationError

E = TypeVar("E", bound=Enum)


def _as_int(value: Any) -> int | None:
    """Return *value* as an ``int`` if it is an integer or integral float."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _int_in_range(field: str, value: Any, low: int, high: int, message: str) -> int | ValidationError:
    as_int = _as_int(value)
    if as_int is None or not low <= as_int <= high:
        return ValidationError(field=field, value=value, expected=f"[{low}, {high}]", message=message)
    return as_int


def _real_in_range(field: str, value: Any, low: float, high: float, message: str) -> float | ValidationError:
    # Written as a chained comparison so NaN fails.
    if not _is_real(value) or not low <= value <= high:
        return ValidationError(field=field, value=value, expected=f"[{low:g}, {high:g}]", message=message)
    return float(value)


def _member(field: str, enum_cls: type[E], value: Any, message: str) -> E | ValidationError:
    try:
        if isinstance(value, bool):
            raise ValueError(value)
        return enum_cls(value)
    except (ValueError, TypeError):
        allowed = ", ".join(str(m.value) for m in enum_cls)
        return ValidationError(field=field, value=value, expected=f"one of {{{allowed}}}", message=message)


def _flag(field: str, value: Any, message: str) -> bool | ValidationError:
    if not isinstance(value, bool):
        return ValidationError(field=field, value=value, expected="bool", message=message)
    return value


def _check_flag(value: Any) -> bool | ValidationError:
    return _flag("check", value, "check has to be logical")


def _count(value: Any) -> int | ValidationError:
    return _int_in_range("n", value, MIN_COUNT, MAX_COUNT, "Requests must be between 1 and 10,000 numbers")


def _columns(value: Any) -> int | ValidationError:
    as_int = _as_int(value)
    if as_int is None or as_int < 1:
        return ValidationError(
            field="columns", value=value, expected=">= 1", message="Columns must be a positive integer"
        )
    return as_int


def _decimals(value: Any) -> int | ValidationError:
    return _int_in_range(
        "decimals", value, MIN_DECIMALS, MAX_DECIMALS, "Decimal places must be between 2 and 20"
    )


def _integer_range(low: Any, high: Any) -> tuple[int, int] | ValidationError:
    message = "Range must be between -1e9 and 1e9"
    checked_low = _int_in_range("min", low, -INTEGER_LIMIT, INTEGER_LIMIT, message)
    if isinstance(checked_low, ValidationError):
        return checked_low
    checked_high = _int_in_range("max", high, -INTEGER_LIMIT, INTEGER_LIMIT, message)
    if isinstance(checked_high, ValidationError):
        return checked_high
    if checked_low > checked_high:
        return ValidationError(
            field="range", value=(low, high), expected="min <= max", message="min must not exceed max"
        )
    return checked_low, checked_high


def validate_integers(params: IntegerParams) -> IntegerParams | ValidationError:
    """Validate an ``/integers/`` request."""
    n = _count(params.n)
    if isinstance(n, ValidationError):
        return n
    bounds = _integer_range(params.min, params.max)
    if isinstance(bounds, ValidationError):
        return bounds
    base = _member("base", IntegerBase, params.base, "Base has to be one of 2, 8, 10 or 16")
    if isinstance(base, ValidationError):
        return base
    numeric = _flag("numeric", params.numeric, "numeric has to be logical")
    if isinstance(numeric, ValidationError):
        return numeric
    columns = _columns(params.columns)
    if isinstance(columns, ValidationError):
        return columns
    check = _check_flag(params.check)
    if isinstance(check, ValidationError):
        return check
    return replace(params, n=n, min=bounds[0], max=bounds[1], base=base, columns=columns)


def validate_sequence(params: SequenceParams) -> SequenceParams | ValidationError:
    """Validate a ``/sequences/`` request.

    The sequence holds ``max - min + 1`` values, capped at 10,000.
    """
    bounds = _integer_range(params.min, params.max)
    if isinstance(bounds, ValidationError):
        return bounds
    low, high = bounds
    if high - low + 1 > MAX_SEQUENCE_LENGTH:
        return ValidationError(
            field="range",
            value=(params.min, params.max),
            expected=f"max - min + 1 <= {MAX_SEQUENCE_LENGTH}",
            message="Sequences are limited to 10,000 values",
        )
    columns = _columns(params.columns)
    if isinstance(columns, ValidationError):
        return columns
    check = _check_flag(params.check)
    if isinstance(check, ValidationError):
        return check
    return replace(params, min=low, max=high, columns=columns)


def validate_strings(params: StringParams) -> StringParams | ValidationError:
    """Validate a ``/strings/`` request."""
    n = _int_in_range("n", params.n, MIN_COUNT, MAX_COUNT, "1 to 10,000 requests only")
    if isinstance(n, ValidationError):
        return n
    length = _int_in_range(
        "length", params.length, MIN_STRING_LENGTH, MAX_STRING_LENGTH, "Length must be between 1 and 20"
    )
    if isinstance(length, ValidationError):
        return length
    message = "The 'digits', 'upper', 'lower' and 'unique' arguments have to be logical"
    for field in ("digits", "upper", "lower", "unique"):
        flag = _flag(field, getattr(params, field), message)
        if isinstance(flag, ValidationError):
            return flag
    if not (params.digits or params.upper or params.lower):
        return ValidationError(
            field="digits",
            value=(params.digits, params.upper, params.lower),
            expected="at least one of digits, upper, lower",
            message="The 'digits', 'upper' and 'lower' arguments cannot all be false",
        )
    check = _check_flag(params.check)
    if isinstance(check, ValidationError):
        return check
    return replace(params, n=n, length=length)


def validate_gaussian(params: GaussianParams) -> GaussianParams | ValidationError:
    """Validate a ``/gaussian-distributions/`` request."""
    n = _count(params.n)
    if isinstance(n, ValidationError):
        return n
    mean = _real_in_range(
        "mean", params.mean, -GAUSSIAN_LIMIT, GAUSSIAN_LIMIT, "Mean must be between -1e6 and 1e6"
    )
    if isinstance(mean, ValidationError):
        return mean
    stdev = _real_in_range(
        "stdev", params.stdev, -GAUSSIAN_LIMIT, GAUSSIAN_LIMIT, "Std dev must be between -1e6 and 1e6"
    )
    if isinstance(stdev, ValidationError):
        return stdev
    decimals = _decimals(params.decimals)
    if isinstance(decimals, ValidationError):
        return decimals
    columns = _columns(params.columns)
    if isinstance(columns, ValidationError):
        return columns
    check = _check_flag(params.check)
    if isinstance(check, ValidationError):
        return check
    return replace(params, n=n, mean=mean, stdev=stdev, decimals=decimals, columns=columns)


def validate_decimal_fractions(params: DecimalFractionParams) -> DecimalFractionParams | ValidationError:
    """Validate a ``/decimal-fractions/`` request."""
    n = _count(params.n)
    if isinstance(n, ValidationError):
        return n
    decimals = _decimals(params.decimals)
    if isinstance(decimals, ValidationError):
        return decimals
    columns = _columns(params.columns)
    if isinstance(columns, ValidationError):
        return columns
    check = _check_flag(params.check)
    if isinstance(check, ValidationError):
        return check
    return replace(params, n=n, decimals=decimals, columns=columns)


def validate_bytes(params: ByteParams) -> ByteParams | ValidationError:
    """Validate a ``/cgi-bin/randbyte`` request."""
    n = _count(params.n)
    if isinstance(n, ValidationError):
        return n
    fmt = _member("format", ByteFormat, params.format, "Format must be one of b, d, o, h, or file.")
    if isinstance(fmt, ValidationError):
        return fmt
    check = _check_flag(params.check)
    if isinstance(check, ValidationError):
        return check
    return replace(params, n=n, format=fmt)


def validate_bitmap(params: BitmapParams) -> BitmapParams | ValidationError:
    """Validate a ``/bitmaps/`` request, including the save target.

    An existing save target without ``overwrite`` is rejected here so no
    quota is spent on an image that would not be written.
    """
    fmt = _member("format", BitmapFormat, params.format, "Format must be png or gif.")
    if isinstance(fmt, ValidationError):
        return fmt
    message = "Height/Width must be between 1 and 300."
    width = _int_in_range("width", params.width, MIN_BITMAP_SIDE, MAX_BITMAP_SIDE, message)
    if isinstance(width, ValidationError):
        return width
    height = _int_in_range("height", params.height, MIN_BITMAP_SIDE, MAX_BITMAP_SIDE, message)
    if isinstance(height, ValidationError):
        return height
    overwrite = _flag("overwrite", params.overwrite, "overwrite has to be logical")
    if isinstance(overwrite, ValidationError):
        return overwrite
    if params.save_path:
        target = bitmap_target(params.save_path, fmt)
        if target.exists() and not params.overwrite:
            return ValidationError(
                field="save_path",
                value=str(target),
                expected="a path that does not exist, or overwrite=True",
                message=f"File {target} exists. Set overwrite=True to save.",
            )
    check = _check_flag(params.check)
    if isinstance(check, ValidationError):
        return check
    return replace(params, format=fmt, width=width, height=height)
