"""Bit-quota lookups for the caller's network address.

random.org allots each IP address a daily budget of random bits. The quota
is read fresh on every call; nothing is cached. A check followed by a
generation request is two independent round-trips, so another client on the
same address can spend the quota in between.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from randomorg_client.decoding import decode_quota
from randomorg_client.encoding import encode_quota
from randomorg_client.transport import send_request

if TYPE_CHECKING:
    from randomorg_client.config import RandomOrgConfig
    from randomorg_client.logging.logger import RequestLogger
    from randomorg_client.transport import Transport

logger = logging.getLogger("randomorg_client")

DEFAULT_QUOTA_MINIMUM = 500


class QuotaClient:
    """Reads the remaining bit quota from ``/quota/``.

    Args:
        transport: HTTP collaborator.
        config: Supplies the base URL.
        request_logger: Optional recorder for the round-trip.
    """

    def __init__(
        self,
        transport: Transport,
        config: RandomOrgConfig,
        request_logger: RequestLogger | None = None,
    ) -> None:
        self._transport = transport
        self._base_url = config.base_url
        self._request_logger = request_logger

    def get_quota(self) -> int:
        """Return the bits remaining for this address.

        Raises:
            TransportError: If the HTTP call fails.
            ProtocolError: If the body is not an integer.
        """
        response = send_request(self._transport, encode_quota(self._base_url), self._request_logger)
        return decode_quota(response.body)

    def check_quota(self, minimum: float = DEFAULT_QUOTA_MINIMUM) -> bool:
        """Return ``True`` iff at least *minimum* bits remain."""
        quota = self.get_quota()
        if quota < minimum:
            logger.info("Quota %d is below the required %s bits", quota, minimum)
            return False
        return True
