"""Tests for RandomOrgClient: the full validate → quota → encode → decode pipeline."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from randomorg_client.client import RandomOrgClient
from randomorg_client.config import RandomOrgConfig
from randomorg_client.exceptions import (
    ConfigValidationError,
    ProtocolError,
    RequestRejectedError,
    TransportError,
)
from randomorg_client.params import BitmapFormat, IntegerParams
from randomorg_client.persistence import BitmapSaveResult
from randomorg_client.results import Err, Ok, QuotaExhaustedError, ValidationError

_COUNTED_OPERATIONS: list[tuple[str, dict[str, Any]]] = [
    ("random_numbers", {}),
    ("random_strings", {}),
    ("random_gaussian", {}),
    ("random_decimal_fractions", {}),
    ("random_bytes", {}),
]


class TestValidationShortCircuit:
    """Rejected requests must never reach the network."""

    @pytest.mark.parametrize("operation, extra", _COUNTED_OPERATIONS)
    @pytest.mark.parametrize("n", [0, -5, 10001, 1_000_000])
    def test_count_out_of_range(
        self, client: RandomOrgClient, stub: Any, operation: str, extra: dict[str, Any], n: int
    ) -> None:
        result = getattr(client, operation)(n, **extra)
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "n"
        assert stub.calls == []

    @pytest.mark.parametrize("operation", ["random_numbers", "random_sequence"])
    def test_min_greater_than_max(self, client: RandomOrgClient, stub: Any, operation: str) -> None:
        result = getattr(client, operation)(min=10, max=1)
        assert isinstance(result, Err)
        assert result.error.field == "range"
        assert stub.calls == []

    def test_strings_all_classes_false(self, client: RandomOrgClient, stub: Any) -> None:
        result = client.random_strings(5, 8, digits=False, upper=False, lower=False)
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert stub.calls == []

    @pytest.mark.parametrize("operation", [name for name, _ in _COUNTED_OPERATIONS])
    def test_non_bool_check_rejected(self, client: RandomOrgClient, stub: Any, operation: str) -> None:
        result = getattr(client, operation)(check=0)
        assert isinstance(result, Err)
        assert result.error.field == "check"
        assert stub.calls == []

    def test_non_bool_numeric_rejected(self, client: RandomOrgClient, stub: Any) -> None:
        result = client.random_numbers(numeric="no")
        assert isinstance(result, Err)
        assert result.error.field == "numeric"
        assert stub.calls == []

    def test_bad_bitmap_dimension(self, client: RandomOrgClient, stub: Any) -> None:
        result = client.random_bitmap(width=500)
        assert isinstance(result, Err)
        assert result.error.field == "width"
        assert stub.calls == []

    def test_unwrap_raises_rejection(self, client: RandomOrgClient) -> None:
        result = client.random_bytes(5, format="x")
        with pytest.raises(RequestRejectedError) as excinfo:
            result.unwrap()
        assert excinfo.value.error is result.error


class TestQuotaCheck:
    """Tests for the optional pre-flight quota check."""

    def test_insufficient_quota_rejected_without_generation_call(
        self, config: RandomOrgConfig, make_stub: Callable[..., Any]
    ) -> None:
        stub = make_stub(quota_body=b"100\n")
        client = RandomOrgClient(config, stub)
        result = client.random_numbers(3)
        assert isinstance(result, Err)
        assert isinstance(result.error, QuotaExhaustedError)
        assert result.error.minimum == 500
        assert len(stub.quota_calls) == 1
        assert stub.generation_calls == []

    def test_sufficient_quota_proceeds(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"5\n")
        result = client.random_numbers(1)
        assert result == Ok([5])
        assert len(stub.quota_calls) == 1
        assert len(stub.generation_calls) == 1

    def test_check_false_skips_quota(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"5\n")
        client.random_numbers(1, check=False)
        assert stub.quota_calls == []

    def test_quota_minimum_from_config(self, make_stub: Callable[..., Any]) -> None:
        stub = make_stub(quota_body=b"1200\n")
        config = RandomOrgConfig(  # type: ignore[call-arg]
            _env_file=None, log_level="none", quota_minimum=2000
        )
        result = RandomOrgClient(config, stub).random_sequence(max=8)
        assert isinstance(result, Err)
        assert result.error.minimum == 2000

    def test_validation_runs_before_quota(self, client: RandomOrgClient, stub: Any) -> None:
        client.random_gaussian(0)
        assert stub.quota_calls == []

    def test_get_and_check_quota(self, config: RandomOrgConfig, make_stub: Callable[..., Any]) -> None:
        client = RandomOrgClient(config, make_stub(quota_body=b"1200\n"))
        assert client.get_quota() == 1200
        assert client.check_quota(500) is True
        assert client.check_quota(5000) is False


class TestIntegers:
    """Tests for random_numbers()."""

    def test_numeric_round_trip(self, client: RandomOrgClient, stub: Any, parse_query: Any) -> None:
        stub.queue(b"5 10 15")
        result = client.random_numbers(3, max=20)
        assert isinstance(result, Ok)
        assert result.value == [5, 10, 15]
        query = parse_query(stub.generation_calls[0])
        assert query["num"] == "3"
        assert query["max"] == "20"
        assert query["base"] == "10"
        assert query["col"] == "5"

    def test_non_numeric_round_trip(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"5 10 15")
        result = client.random_numbers(3, max=20, numeric=False)
        assert result.unwrap() == ["5", "10", "15"]

    def test_hex_returns_strings(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"1f\n27\n12\n05\n2c\n")
        result = client.random_numbers(5, max=50, base=16)
        assert result.unwrap() == ["1f", "27", "12", "05", "2c"]

    def test_params_object_form(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"1\n2\n")
        result = client.fetch_integers(IntegerParams(n=2, min=1, max=2, check=False))
        assert result.unwrap() == [1, 2]

    def test_malformed_body_raises(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"5 ten 15")
        with pytest.raises(ProtocolError):
            client.random_numbers(3)


class TestSequence:
    """Tests for random_sequence()."""

    def test_permutation(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"4 1 5 3 6 7 8 2")
        result = client.random_sequence(min=1, max=8)
        values = result.unwrap()
        assert len(values) == 8
        assert sorted(values) == list(range(1, 9))

    def test_wrong_length_raises(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"1 2 3")
        with pytest.raises(ProtocolError):
            client.random_sequence(min=1, max=8)


class TestStrings:
    """Tests for random_strings()."""

    def test_flags_encoded(self, client: RandomOrgClient, stub: Any, parse_query: Any) -> None:
        stub.queue(b"cKIG\nHUir\ngAzX\n")
        result = client.random_strings(3, 4, digits=False)
        assert result.unwrap() == ["cKIG", "HUir", "gAzX"]
        query = parse_query(stub.generation_calls[0])
        assert query["digits"] == "off"
        assert query["upperalpha"] == "on"
        assert query["loweralpha"] == "on"
        assert query["unique"] == "on"
        assert query["len"] == "4"


class TestFloats:
    """Tests for random_gaussian() and random_decimal_fractions()."""

    def test_gaussian(self, client: RandomOrgClient, stub: Any, parse_query: Any) -> None:
        stub.queue(b"-3.6174e-01\n9.5992e-01\n")
        result = client.random_gaussian(2, decimals=5)
        assert result.unwrap() == pytest.approx([-0.36174, 0.95992])
        query = parse_query(stub.generation_calls[0])
        assert query["mean"] == "0.000000"
        assert query["stdev"] == "1.000000"
        assert query["notation"] == "scientific"
        assert query["dec"] == "5"

    def test_decimal_fractions(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"0.788 0.949\n0.773\n")
        result = client.random_decimal_fractions(3, decimals=3)
        assert result.unwrap() == pytest.approx([0.788, 0.949, 0.773])


class TestBytes:
    """Tests for random_bytes()."""

    def test_octal_default(self, client: RandomOrgClient, stub: Any, parse_query: Any) -> None:
        stub.queue(b"075 030 317 277 356\n")
        result = client.random_bytes(5)
        assert result.unwrap() == ["075", "030", "317", "277", "356"]
        assert parse_query(stub.generation_calls[0])["format"] == "o"

    def test_file_format_returns_bytes(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(b"\xda\xdf\xd9\xb3\x97")
        result = client.random_bytes(5, format="file")
        assert result.unwrap() == b"\xda\xdf\xd9\xb3\x97"


class TestBitmap:
    """Tests for random_bitmap() and saving."""

    _PNG = b"\x89PNG\r\n\x1a\nrandom-pixels"

    def test_returns_bytes_without_save_path(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(self._PNG)
        assert client.random_bitmap().unwrap() == self._PNG

    def test_empty_path_object_returns_bytes(
        self, client: RandomOrgClient, stub: Any, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        stub.queue(self._PNG)
        assert client.random_bitmap(save_path=Path("")).unwrap() == self._PNG
        assert list(tmp_path.iterdir()) == []

    def test_saves_to_new_file(self, client: RandomOrgClient, stub: Any, tmp_path: Path) -> None:
        stub.queue(self._PNG)
        result = client.random_bitmap(save_path=tmp_path / "x")
        saved = result.unwrap()
        assert isinstance(saved, BitmapSaveResult)
        assert saved.written is True
        assert saved.path == tmp_path / "x.png"
        assert (tmp_path / "x.png").read_bytes() == self._PNG

    def test_existing_file_not_overwritten(self, client: RandomOrgClient, stub: Any, tmp_path: Path) -> None:
        target = tmp_path / "x.png"
        target.write_bytes(b"original")
        result = client.random_bitmap(save_path=str(tmp_path / "x"), overwrite=False)
        assert isinstance(result, Err)
        assert "exists" in result.error.message
        assert target.read_bytes() == b"original"
        assert stub.calls == []

    def test_existing_file_overwritten_on_request(
        self, client: RandomOrgClient, stub: Any, tmp_path: Path
    ) -> None:
        target = tmp_path / "x.png"
        target.write_bytes(b"original")
        stub.queue(self._PNG)
        result = client.random_bitmap(save_path=str(tmp_path / "x"), overwrite=True)
        saved = result.unwrap()
        assert saved.written is True
        assert target.read_bytes() == self._PNG

    def test_gif_extension(self, client: RandomOrgClient, stub: Any, tmp_path: Path) -> None:
        stub.queue(b"GIF89a...")
        saved = client.random_bitmap(format=BitmapFormat.GIF, save_path=tmp_path / "img").unwrap()
        assert saved.path.name == "img.gif"


class TestTransportFailures:
    """Transport failures are raised, not retried."""

    def test_transport_error_propagates_once(self, client: RandomOrgClient, stub: Any) -> None:
        stub.queue(TransportError("HTTP 503 from random.org", status_code=503), b"1\n")
        with pytest.raises(TransportError) as excinfo:
            client.random_numbers(1)
        assert excinfo.value.status_code == 503
        assert len(stub.generation_calls) == 1


class TestLifecycle:
    """Construction, overrides and closing."""

    def test_overrides_applied(self, config: RandomOrgConfig, stub: Any) -> None:
        client = RandomOrgClient(config, stub, quota_minimum=10)
        assert client.config.quota_minimum == 10
        assert config.quota_minimum == 500

    def test_unknown_override_rejected(self, config: RandomOrgConfig, stub: Any) -> None:
        with pytest.raises(ConfigValidationError):
            RandomOrgClient(config, stub, no_such_field=1)

    def test_injected_transport_not_closed(self, config: RandomOrgConfig, stub: Any) -> None:
        with RandomOrgClient(config, stub):
            pass
        assert stub.closed is False

    def test_diagnostics_record_round_trips(self, stub: Any) -> None:
        config = RandomOrgConfig(  # type: ignore[call-arg]
            _env_file=None, log_level="none", diagnostic_mode=True
        )
        client = RandomOrgClient(config, stub)
        stub.queue(b"1\n")
        client.random_numbers(1)
        endpoints = [r.endpoint for r in client.request_logger.get_diagnostic_data()]
        assert endpoints == ["quota", "integers"]
