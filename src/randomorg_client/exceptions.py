"""Exception hierarchy for randomorg-client.

All raised exceptions derive from RandomOrgError, enabling broad catch
patterns at the application boundary while allowing fine-grained handling
internally.

Validation and quota rejections are *not* raised: they are returned as
values inside :class:`~randomorg_client.results.Err`. Only failures that
the library cannot resolve locally (network, malformed responses, bad
configuration) travel as exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from randomorg_client.results import RejectionError


class RandomOrgError(Exception):
    """Base exception for all randomorg-client errors."""


class TransportError(RandomOrgError):
    """The HTTP call to random.org failed.

    Raised for connection errors, timeouts, and non-2xx responses. Never
    retried by this library.

    Attributes:
        url: The URL that was requested, when known.
        status_code: HTTP status of the response, or ``None`` if no
            response was received.
    """

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ProtocolError(RandomOrgError):
    """A response body does not have the shape expected for its endpoint.

    Raised when, e.g., a non-numeric token appears where an integer was
    expected, or the quota endpoint returns something other than a number.
    """


class ConfigValidationError(RandomOrgError, ValueError):
    """Configuration field validation failed.

    Raised by :func:`~randomorg_client.config.resolve_config`, which wraps
    pydantic's ``ValidationError``. Subclasses ``ValueError`` so callers
    catching ``ValueError`` still see it.
    """


class RequestRejectedError(RandomOrgError):
    """Raised by ``Err.unwrap()`` for callers that prefer exceptions.

    Attributes:
        error: The returned rejection value that was unwrapped.
    """

    def __init__(self, error: RejectionError) -> None:
        super().__init__(error.message)
        self.error = error
