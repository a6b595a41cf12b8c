"""Request diagnostics subsystem for randomorg-client.

Provides immutable per-request records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from randomorg_client.logging.logger import RequestLogger
from randomorg_client.logging.types import RequestRecord

__all__ = [
    "RequestLogger",
    "RequestRecord",
]
