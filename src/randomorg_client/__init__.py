"""randomorg-client: typed access to random.org's true random numbers.

Validates requests locally against random.org's limits, encodes them onto
the plain-text HTTP API, and decodes the responses into integers, floats,
strings, raw bytes or images. Validation and quota rejections are returned
as values; transport and protocol failures are raised.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("randomorg-client")
except PackageNotFoundError:
    __version__ = "0.0.0"

from randomorg_client.client import RandomOrgClient
from randomorg_client.config import RandomOrgConfig, resolve_config
from randomorg_client.exceptions import (
    ConfigValidationError,
    ProtocolError,
    RandomOrgError,
    RequestRejectedError,
    TransportError,
)
from randomorg_client.params import (
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
from randomorg_client.persistence import BitmapSaveResult, save_bitmap
from randomorg_client.results import Err, Ok, QuotaExhaustedError, Result, ValidationError
from randomorg_client.transport import HttpResponse, HttpxTransport, Transport

__all__ = [
    "BitmapFormat",
    "BitmapParams",
    "BitmapSaveResult",
    "ByteFormat",
    "ByteParams",
    "ConfigValidationError",
    "DecimalFractionParams",
    "Err",
    "GaussianParams",
    "HttpResponse",
    "HttpxTransport",
    "IntegerBase",
    "IntegerParams",
    "Ok",
    "ProtocolError",
    "QuotaExhaustedError",
    "RandomOrgClient",
    "RandomOrgConfig",
    "RandomOrgError",
    "RequestRejectedError",
    "Result",
    "SequenceParams",
    "StringParams",
    "Transport",
    "TransportError",
    "ValidationError",
    "__version__",
    "resolve_config",
    "save_bitmap",
]
