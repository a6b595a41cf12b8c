"""Public operation surface of randomorg-client.

Every operation runs the same pipeline:
    validate → (optional) quota check → encode → GET → decode → (bitmap) save.

Validation and quota rejections come back as :class:`~randomorg_client.results.Err`
without any request to the generation endpoint. Transport and protocol
failures are raised, never retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from randomorg_client import validation
from randomorg_client.config import RandomOrgConfig, resolve_config
from randomorg_client.decoding import (
    decode_bitmap,
    decode_bytes,
    decode_floats,
    decode_integers,
    decode_sequence,
    decode_strings,
)
from randomorg_client.encoding import (
    EncodedRequest,
    encode_bitmap,
    encode_bytes,
    encode_decimal_fractions,
    encode_gaussian,
    encode_integers,
    encode_sequence,
    encode_strings,
)
from randomorg_client.logging.logger import RequestLogger
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
from randomorg_client.quota import DEFAULT_QUOTA_MINIMUM, QuotaClient
from randomorg_client.results import Err, Ok, QuotaExhaustedError, Result, ValidationError
from randomorg_client.transport import HttpxTransport, Transport, send_request

logger = logging.getLogger("randomorg_client")

P = TypeVar("P")
T = TypeVar("T")


class RandomOrgClient:
    """Client for random.org's plain-text HTTP API.

    Args:
        config: Base configuration; loaded from the environment when ``None``.
        transport: HTTP collaborator; an :class:`HttpxTransport` is built
            (and owned) when ``None``.
        **overrides: Config fields to override, e.g. ``timeout_s=5.0``.

    Raises:
        ConfigValidationError: If the resolved configuration is invalid.
    """

    def __init__(
        self,
        config: RandomOrgConfig | None = None,
        transport: Transport | None = None,
        **overrides: Any,
    ) -> None:
        self._config = resolve_config(config, overrides)
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport(self._config)
        self._request_logger = RequestLogger(self._config)
        self._quota = QuotaClient(self._transport, self._config, self._request_logger)

    @property
    def config(self) -> RandomOrgConfig:
        return self._config

    @property
    def request_logger(self) -> RequestLogger:
        return self._request_logger

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> RandomOrgClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --- Quota ---

    def get_quota(self) -> int:
        """Return the bits remaining for this address."""
        return self._quota.get_quota()

    def check_quota(self, minimum: float = DEFAULT_QUOTA_MINIMUM) -> bool:
        """Return ``True`` iff at least *minimum* bits remain."""
        return self._quota.check_quota(minimum)

    # --- Pipeline ---

    def _run(
        self,
        params: P,
        validate: Callable[[P], P | ValidationError],
        encode: Callable[[str, P], EncodedRequest],
        decode: Callable[[P, bytes], T],
    ) -> Result[T]:
        checked = validate(params)
        if isinstance(checked, ValidationError):
            logger.info("Rejected %s: %s", type(params).__name__, checked.message)
            return Err(checked)

        if getattr(checked, "check", False):
            minimum = self._config.quota_minimum
            if not self._quota.check_quota(minimum):
                return Err(QuotaExhaustedError(minimum=minimum))

        request = encode(self._config.base_url, checked)
        response = send_request(self._transport, request, self._request_logger)
        return Ok(decode(checked, response.body))

    # --- Params-object forms ---

    def fetch_integers(self, params: IntegerParams) -> Result[list[int] | list[str]]:
        return self._run(
            params,
            validation.validate_integers,
            encode_integers,
            lambda p, body: decode_integers(body, p.base, p.numeric, expected=p.n),
        )

    def fetch_sequence(self, params: SequenceParams) -> Result[list[int]]:
        return self._run(
            params,
            validation.validate_sequence,
            encode_sequence,
            lambda p, body: decode_sequence(body, expected=p.max - p.min + 1),
        )

    def fetch_strings(self, params: StringParams) -> Result[list[str]]:
        return self._run(
            params,
            validation.validate_strings,
            encode_strings,
            lambda p, body: decode_strings(body, expected=p.n),
        )

    def fetch_gaussian(self, params: GaussianParams) -> Result[list[float]]:
        return self._run(
            params,
            validation.validate_gaussian,
            encode_gaussian,
            lambda p, body: decode_floats(body, "gaussian", expected=p.n),
        )

    def fetch_decimal_fractions(self, params: DecimalFractionParams) -> Result[list[float]]:
        return self._run(
            params,
            validation.validate_decimal_fractions,
            encode_decimal_fractions,
            lambda p, body: decode_floats(body, "decimal_fractions", expected=p.n),
        )

    def fetch_bytes(self, params: ByteParams) -> Result[list[str] | bytes]:
        return self._run(
            params,
            validation.validate_bytes,
            encode_bytes,
            lambda p, body: decode_bytes(body, p.format, expected=p.n),
        )

    def fetch_bitmap(self, params: BitmapParams) -> Result[bytes | BitmapSaveResult]:
        def decode(p: BitmapParams, body: bytes) -> bytes | BitmapSaveResult:
            image = decode_bitmap(body)
            if not p.save_path:
                return image
            return save_bitmap(image, p.save_path, p.format, overwrite=p.overwrite)

        return self._run(params, validation.validate_bitmap, encode_bitmap, decode)

    # --- Keyword forms ---

    def random_numbers(
        self,
        n: Any = 100,
        min: Any = 1,
        max: Any = 20,
        base: Any = IntegerBase.DECIMAL,
        numeric: bool = True,
        check: bool = True,
        columns: Any = 5,
    ) -> Result[list[int] | list[str]]:
        """Get *n* random integers on ``[min, max]``.

        Payloads in base 2, 8 or 16, or with ``numeric=False``, come back as
        the strings random.org sent.

        Example::

            >>> client.random_numbers(5, max=200).unwrap()
            [69, 107, 69, 155, 72]
        """
        return self.fetch_integers(IntegerParams(n, min, max, base, numeric, check, columns))

    def random_sequence(
        self,
        min: Any = 1,
        max: Any = 20,
        columns: Any = 1,
        check: bool = True,
    ) -> Result[list[int]]:
        """Get the integers ``min..max`` in random order."""
        return self.fetch_sequence(SequenceParams(min, max, columns, check))

    def random_strings(
        self,
        n: Any = 10,
        length: Any = 5,
        digits: Any = True,
        upper: Any = True,
        lower: Any = True,
        unique: Any = True,
        check: bool = True,
    ) -> Result[list[str]]:
        """Get *n* random strings of *length* characters."""
        return self.fetch_strings(StringParams(n, length, digits, upper, lower, unique, check))

    def random_gaussian(
        self,
        n: Any = 10,
        mean: Any = 0.0,
        stdev: Any = 1.0,
        decimals: Any = 10,
        columns: Any = 1,
        check: bool = True,
    ) -> Result[list[float]]:
        """Get *n* draws from a Gaussian with *mean* and *stdev*."""
        return self.fetch_gaussian(GaussianParams(n, mean, stdev, decimals, columns, check))

    def random_decimal_fractions(
        self,
        n: Any = 10,
        decimals: Any = 10,
        columns: Any = 2,
        check: bool = True,
    ) -> Result[list[float]]:
        """Get *n* decimal fractions on (0, 1)."""
        return self.fetch_decimal_fractions(DecimalFractionParams(n, decimals, columns, check))

    def random_bytes(
        self,
        n: Any = 10,
        format: Any = ByteFormat.OCTAL,
        check: bool = True,
    ) -> Result[list[str] | bytes]:
        """Get *n* random bytes, as text tokens or (``format="file"``) raw bytes."""
        return self.fetch_bytes(ByteParams(n, format, check))

    def random_bitmap(
        self,
        format: Any = BitmapFormat.PNG,
        width: Any = 64,
        height: Any = 64,
        save_path: str | Path = "",
        overwrite: Any = False,
        check: bool = True,
    ) -> Result[bytes | BitmapSaveResult]:
        """Get a random bitmap, returned as bytes or saved to ``<save_path>.<format>``."""
        # str(Path("")) is ".", which would save to "..png".
        target = "" if save_path in ("", Path("")) else str(save_path)
        return self.fetch_bitmap(BitmapParams(format, width, height, target, overwrite, check))
