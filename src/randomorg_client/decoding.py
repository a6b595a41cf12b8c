"""Response decoding for every random.org endpoint.

Plain-text bodies are whitespace-delimited tokens (the line layout set by
``col`` is irrelevant here). Decoders check structure only: each token must
look like what the endpoint promises, and the token count must match the
request when it is known. Value ranges are the server's responsibility and
are not re-checked.

Any structural mismatch raises :class:`~randomorg_client.exceptions.ProtocolError`;
no partial result is ever returned.
"""

from __future__ import annotations

import re

from randomorg_client.exceptions import ProtocolError
from randomorg_client.params import ByteFormat, IntegerBase

_DECIMAL_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_STRING = re.compile(r"[0-9A-Za-z]+")

_INTEGER_TOKENS: dict[IntegerBase, re.Pattern[str]] = {
    IntegerBase.BINARY: re.compile(r"-?[01]+"),
    IntegerBase.OCTAL: re.compile(r"-?[0-7]+"),
    IntegerBase.DECIMAL: _DECIMAL_INT,
    IntegerBase.HEX: re.compile(r"-?[0-9A-Fa-f]+"),
}

_BYTE_TOKENS: dict[ByteFormat, re.Pattern[str]] = {
    ByteFormat.BINARY: re.compile(r"[01]{1,8}"),
    ByteFormat.DECIMAL: re.compile(r"\d{1,3}"),
    ByteFormat.OCTAL: re.compile(r"[0-7]{1,3}"),
    ByteFormat.HEX: re.compile(r"[0-9A-Fa-f]{1,2}"),
}


def _text(body: bytes, endpoint: str) -> str:
    try:
        return body.decode("ascii")
    except UnicodeDecodeError as exc:
        raise ProtocolError(f"{endpoint} response is not plain ASCII text") from exc


def _tokens(body: bytes, endpoint: str, expected: int | None = None) -> list[str]:
    tokens = _text(body, endpoint).rstrip().split()
    if expected is not None and len(tokens) != expected:
        raise ProtocolError(f"{endpoint} response has {len(tokens)} values, expected {expected}")
    return tokens


def _check_tokens(tokens: list[str], pattern: re.Pattern[str], endpoint: str, kind: str) -> None:
    for token in tokens:
        if not pattern.fullmatch(token):
            raise ProtocolError(f"{endpoint} response contains {token!r} where {kind} was expected")


def decode_quota(body: bytes) -> int:
    """Parse the quota endpoint's body as a base-10 integer."""
    text = _text(body, "quota").rstrip()
    if not _DECIMAL_INT.fullmatch(text):
        raise ProtocolError(f"quota response is not an integer: {text[:40]!r}")
    return int(text)


def decode_integers(
    body: bytes,
    base: IntegerBase,
    numeric: bool = True,
    expected: int | None = None,
) -> list[int] | list[str]:
    """Decode an ``/integers/`` body.

    Only base-10 payloads with *numeric* set are parsed to ``int``; anything
    else stays as the literal tokens so leading zeros and non-decimal digits
    survive.
    """
    tokens = _tokens(body, "integers", expected)
    _check_tokens(tokens, _INTEGER_TOKENS[base], "integers", f"a base-{int(base)} integer")
    if numeric and base is IntegerBase.DECIMAL:
        return [int(token) for token in tokens]
    return tokens


def decode_sequence(body: bytes, expected: int | None = None) -> list[int]:
    """Decode a ``/sequences/`` body into integers."""
    tokens = _tokens(body, "sequences", expected)
    _check_tokens(tokens, _DECIMAL_INT, "sequences", "an integer")
    return [int(token) for token in tokens]


def decode_floats(body: bytes, endpoint: str, expected: int | None = None) -> list[float]:
    """Decode a Gaussian or decimal-fraction body into floats."""
    tokens = _tokens(body, endpoint, expected)
    _check_tokens(tokens, _FLOAT, endpoint, "a number")
    return [float(token) for token in tokens]


def decode_strings(body: bytes, expected: int | None = None) -> list[str]:
    """Decode a ``/strings/`` body; tokens are returned as sent."""
    tokens = _tokens(body, "strings", expected)
    _check_tokens(tokens, _STRING, "strings", "an alphanumeric string")
    return tokens


def decode_bytes(body: bytes, fmt: ByteFormat, expected: int | None = None) -> list[str] | bytes:
    """Decode a ``/cgi-bin/randbyte`` body.

    ``ByteFormat.FILE`` returns the body untouched; the text formats return
    one string token per byte.
    """
    if fmt is ByteFormat.FILE:
        if expected is not None and len(body) != expected:
            raise ProtocolError(f"bytes response has {len(body)} bytes, expected {expected}")
        return bytes(body)
    tokens = _tokens(body, "bytes", expected)
    _check_tokens(tokens, _BYTE_TOKENS[fmt], "bytes", f"a byte in format {fmt.value!r}")
    return tokens


def decode_bitmap(body: bytes) -> bytes:
    """Pass an image body through; only emptiness is rejected."""
    if not body:
        raise ProtocolError("bitmap response is empty")
    return bytes(body)
