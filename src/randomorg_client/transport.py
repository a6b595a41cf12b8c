"""HTTP transport collaborator.

The client only ever needs a blocking GET that returns status, headers and
raw body. :class:`Transport` is that seam; :class:`HttpxTransport` is the
production implementation on top of ``httpx.Client``. Tests substitute
their own Transport without touching any global state.

TLS, connection pooling and timeouts belong to the transport. There are no
retries.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from randomorg_client.exceptions import TransportError
from randomorg_client.logging.types import RequestRecord

if TYPE_CHECKING:
    from randomorg_client.config import RandomOrgConfig
    from randomorg_client.encoding import EncodedRequest
    from randomorg_client.logging.logger import RequestLogger

logger = logging.getLogger("randomorg_client")


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """A completed HTTP exchange.

    Attributes:
        status_code: HTTP status code (always 2xx when returned by a transport).
        body: Raw response body.
        headers: Response headers.
    """

    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(ABC):
    """Abstract blocking HTTP GET capability."""

    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """Perform a GET request.

        Args:
            url: Absolute URL including the query string.

        Returns:
            The response, only for 2xx statuses.

        Raises:
            TransportError: On connection failure, timeout, or non-2xx status.
        """

    def close(self) -> None:
        """Release resources. The default implementation holds none."""

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class HttpxTransport(Transport):
    """``httpx.Client``-backed transport.

    Args:
        config: Supplies the timeout and User-Agent.
        client: Optional pre-built ``httpx.Client`` (e.g. one wrapping an
            ``httpx.MockTransport``). A supplied client is not closed by
            :meth:`close`.
    """

    def __init__(self, config: RandomOrgConfig, client: httpx.Client | None = None) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=httpx.Timeout(config.timeout_s),
                headers={"User-Agent": config.user_agent},
                follow_redirects=True,
            )
        self._client = client

    def get(self, url: str) -> HttpResponse:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("random.org returned HTTP %d for %s", status, url)
            raise TransportError(f"HTTP {status} from random.org", url=url, status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("HTTP request to %s failed: %s", url, exc)
            raise TransportError(f"Request to random.org failed: {exc}", url=url) from exc
        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


def send_request(
    transport: Transport,
    request: EncodedRequest,
    request_logger: RequestLogger | None = None,
) -> HttpResponse:
    """Send *request* through *transport*, timing and recording the round-trip."""
    timestamp_ns = time.time_ns()
    t0 = time.perf_counter()
    response = transport.get(request.url)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    if request_logger is not None:
        request_logger.log_request(
            RequestRecord(
                timestamp_ns=timestamp_ns,
                endpoint=request.endpoint,
                url=request.url,
                status_code=response.status_code,
                body_bytes=len(response.body),
                elapsed_ms=elapsed_ms,
            )
        )
    return response
