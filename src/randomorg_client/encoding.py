"""Canonical query encoding for each random.org endpoint.

Encoders take *validated* params and render every numeric parameter in base
10, booleans as ``on``/``off`` and floats with fixed ``%f`` formatting.
Every request ends with ``rnd=new`` so intermediaries never serve a cached
draw.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode

from randomorg_client.params import (
    BitmapParams,
    ByteParams,
    DecimalFractionParams,
    GaussianParams,
    IntegerParams,
    SequenceParams,
    StringParams,
)

QUOTA_PATH = "/quota/"
INTEGERS_PATH = "/integers/"
SEQUENCES_PATH = "/sequences/"
STRINGS_PATH = "/strings/"
GAUSSIAN_PATH = "/gaussian-distributions/"
DECIMAL_FRACTIONS_PATH = "/decimal-fractions/"
BYTES_PATH = "/cgi-bin/randbyte"
BITMAPS_PATH = "/bitmaps/"

_CACHE_BUSTER = ("rnd", "new")


@dataclass(frozen=True, slots=True)
class EncodedRequest:
    """A ready-to-send GET request.

    Attributes:
        endpoint: Short endpoint name used in logs (e.g. ``"integers"``).
        url: Absolute URL including the query string.
    """

    endpoint: str
    url: str


def _on_off(flag: bool) -> str:
    return "on" if flag else "off"


def _build(base_url: str, endpoint: str, path: str, pairs: list[tuple[str, str]]) -> EncodedRequest:
    query = urlencode([*pairs, _CACHE_BUSTER])
    return EncodedRequest(endpoint=endpoint, url=f"{base_url}{path}?{query}")


def encode_quota(base_url: str) -> EncodedRequest:
    return _build(base_url, "quota", QUOTA_PATH, [("format", "plain")])


def encode_integers(base_url: str, params: IntegerParams) -> EncodedRequest:
    pairs = [
        ("num", "%d" % params.n),
        ("min", "%d" % params.min),
        ("max", "%d" % params.max),
        ("col", "%d" % params.columns),
        ("base", "%d" % params.base),
        ("format", "plain"),
    ]
    return _build(base_url, "integers", INTEGERS_PATH, pairs)


def encode_sequence(base_url: str, params: SequenceParams) -> EncodedRequest:
    pairs = [
        ("min", "%d" % params.min),
        ("max", "%d" % params.max),
        ("col", "%d" % params.columns),
        ("format", "plain"),
    ]
    return _build(base_url, "sequences", SEQUENCES_PATH, pairs)


def encode_strings(base_url: str, params: StringParams) -> EncodedRequest:
    pairs = [
        ("num", "%d" % params.n),
        ("len", "%d" % params.length),
        ("digits", _on_off(params.digits)),
        ("upperalpha", _on_off(params.upper)),
        ("loweralpha", _on_off(params.lower)),
        ("unique", _on_off(params.unique)),
        ("format", "plain"),
    ]
    return _build(base_url, "strings", STRINGS_PATH, pairs)


def encode_gaussian(base_url: str, params: GaussianParams) -> EncodedRequest:
    """Encode a Gaussian request; notation is always ``scientific``."""
    pairs = [
        ("num", "%d" % params.n),
        ("mean", "%f" % params.mean),
        ("stdev", "%f" % params.stdev),
        ("dec", "%d" % params.decimals),
        ("col", "%d" % params.columns),
        ("notation", "scientific"),
        ("format", "plain"),
    ]
    return _build(base_url, "gaussian", GAUSSIAN_PATH, pairs)


def encode_decimal_fractions(base_url: str, params: DecimalFractionParams) -> EncodedRequest:
    pairs = [
        ("num", "%d" % params.n),
        ("dec", "%d" % params.decimals),
        ("col", "%d" % params.columns),
        ("format", "plain"),
    ]
    return _build(base_url, "decimal_fractions", DECIMAL_FRACTIONS_PATH, pairs)


def encode_bytes(base_url: str, params: ByteParams) -> EncodedRequest:
    pairs = [
        ("nbytes", "%d" % params.n),
        ("format", params.format.value),
    ]
    return _build(base_url, "bytes", BYTES_PATH, pairs)


def encode_bitmap(base_url: str, params: BitmapParams) -> EncodedRequest:
    pairs = [
        ("format", params.format.value),
        ("width", "%d" % params.width),
        ("height", "%d" % params.height),
        ("zoom", "1"),
    ]
    return _build(base_url, "bitmap", BITMAPS_PATH, pairs)
