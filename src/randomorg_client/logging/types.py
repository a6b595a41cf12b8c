"""Data types for the request diagnostics subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RequestRecord:
    """Immutable record of one HTTP round-trip to random.org.

    Attributes:
        timestamp_ns: Wall-clock time the request started (ns since epoch).
        endpoint: Short endpoint name (``"quota"``, ``"integers"``, ...).
        url: Full request URL.
        status_code: HTTP status of the response.
        body_bytes: Size of the response body.
        elapsed_ms: Round-trip time in milliseconds.
    """

    timestamp_ns: int
    endpoint: str
    url: str
    status_code: int
    body_bytes: int
    elapsed_ms: float
