"""Per-endpoint request parameters and their closed selector enumerations.

Each dataclass mirrors one public operation's keyword arguments and
defaults. Instances are built before validation, so fields may hold loose
values (``16`` for a base, ``"o"`` for a byte format); the validators in
:mod:`randomorg_client.validation` return a normalized copy with the
selectors coerced to enumeration members.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

# --- Server-side limits ---

MAX_COUNT = 10_000
MIN_COUNT = 1
INTEGER_LIMIT = 1_000_000_000
GAUSSIAN_LIMIT = 1_000_000
MIN_DECIMALS = 2
MAX_DECIMALS = 20
MIN_STRING_LENGTH = 1
MAX_STRING_LENGTH = 20
MAX_SEQUENCE_LENGTH = 10_000
MIN_BITMAP_SIDE = 1
MAX_BITMAP_SIDE = 300


class IntegerBase(IntEnum):
    """Base in which random.org renders integers."""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16


class ByteFormat(str, Enum):
    """Rendering of random bytes; ``FILE`` returns the raw payload."""

    BINARY = "b"
    DECIMAL = "d"
    OCTAL = "o"
    HEX = "h"
    FILE = "file"


class BitmapFormat(str, Enum):
    """Image container for random bitmaps."""

    PNG = "png"
    GIF = "gif"


@dataclass(frozen=True, slots=True)
class IntegerParams:
    """Parameters for ``/integers/``.

    Attributes:
        n: How many integers, in [1, 10000].
        min: Lower bound, in [-1e9, 1e9].
        max: Upper bound, in [-1e9, 1e9], not below *min*.
        base: Payload base, one of 2, 8, 10, 16.
        numeric: Parse base-10 payloads to ``int`` instead of returning strings.
        check: Consult the quota before requesting.
        columns: Values per line in the plain-text response.
    """

    n: Any = 100
    min: Any = 1
    max: Any = 20
    base: Any = IntegerBase.DECIMAL
    numeric: bool = True
    check: bool = True
    columns: Any = 5


@dataclass(frozen=True, slots=True)
class SequenceParams:
    """Parameters for ``/sequences/``; yields ``max - min + 1`` values."""

    min: Any = 1
    max: Any = 20
    columns: Any = 1
    check: bool = True


@dataclass(frozen=True, slots=True)
class StringParams:
    """Parameters for ``/strings/``.

    At least one of *digits*, *upper* and *lower* must be ``True``; all four
    flags must be real booleans.
    """

    n: Any = 10
    length: Any = 5
    digits: Any = True
    upper: Any = True
    lower: Any = True
    unique: Any = True
    check: bool = True


@dataclass(frozen=True, slots=True)
class GaussianParams:
    """Parameters for ``/gaussian-distributions/`` (scientific notation only)."""

    n: Any = 10
    mean: Any = 0.0
    stdev: Any = 1.0
    decimals: Any = 10
    columns: Any = 1
    check: bool = True


@dataclass(frozen=True, slots=True)
class DecimalFractionParams:
    """Parameters for ``/decimal-fractions/``; values lie in (0, 1)."""

    n: Any = 10
    decimals: Any = 10
    columns: Any = 2
    check: bool = True


@dataclass(frozen=True, slots=True)
class ByteParams:
    """Parameters for ``/cgi-bin/randbyte``."""

    n: Any = 10
    format: Any = ByteFormat.OCTAL
    check: bool = True


@dataclass(frozen=True, slots=True)
class BitmapParams:
    """Parameters for ``/bitmaps/``.

    Attributes:
        format: ``png`` or ``gif``.
        width: Pixels, in [1, 300].
        height: Pixels, in [1, 300].
        save_path: Base path to save to (extension appended); empty means
            return the bytes instead.
        overwrite: Replace an existing file at the save target.
        check: Consult the quota before requesting.
    """

    format: Any = BitmapFormat.PNG
    width: Any = 64
    height: Any = 64
    save_path: str = ""
    overwrite: Any = False
    check: bool = True
