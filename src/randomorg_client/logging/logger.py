"""Diagnostic logger for random.org round-trips.

Uses the standard ``logging`` module with the ``"randomorg_client"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from randomorg_client.config import RandomOrgConfig
    from randomorg_client.logging.types import RequestRecord

logger = logging.getLogger("randomorg_client")


class RequestLogger:
    """Per-request diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per request with endpoint, status, size and
        timing.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for later inspection via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: RandomOrgConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[RequestRecord] = []

    def log_request(self, record: RequestRecord) -> None:
        """Log a single round-trip."""
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "endpoint=%s status=%d bytes=%d elapsed=%.2fms",
                record.endpoint,
                record.status_code,
                record.body_bytes,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("request_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[RequestRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute aggregate statistics over all stored records.

        Returns:
            Dictionary with request counts and timing, or empty dict if no
            records.
        """
        if not self._records:
            return {}

        elapsed = [r.elapsed_ms for r in self._records]
        per_endpoint: dict[str, int] = {}
        for record in self._records:
            per_endpoint[record.endpoint] = per_endpoint.get(record.endpoint, 0) + 1

        n = len(self._records)
        return {
            "total_requests": n,
            "requests_by_endpoint": per_endpoint,
            "total_body_bytes": sum(r.body_bytes for r in self._records),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
        }
