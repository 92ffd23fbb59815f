"""Tests for ledger close-time extraction and value formatting helpers."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stellaretl.errors import InvalidTimestampError, UnsupportedLedgerFormatError
from stellaretl.formatting import account_address, hash_to_hex, stroops_to_real, time_point_to_utc
from stellaretl.ledger_meta import extract_close_time
from stellaretl.models.ledger import LedgerCloseMeta, LedgerCloseMetaV0, LedgerHeader, MuxedAccount

_TS = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)

# 9999-12-31T23:59:59Z, the last second a datetime can hold.
_LAST_REPRESENTABLE = 253402300799


def _make_ledger(close_time: int = int(_TS.timestamp()), version: int = 0, seq: int = 30_000_000) -> LedgerCloseMeta:
    return LedgerCloseMeta(
        version=version,
        v0=LedgerCloseMetaV0(header=LedgerHeader(ledger_seq=seq, close_time=close_time)),
    )


class TestExtractCloseTime:
    def test_returns_utc_datetime(self) -> None:
        close = extract_close_time(_make_ledger())
        assert close == _TS
        assert close.tzinfo is UTC

    def test_epoch(self) -> None:
        assert extract_close_time(_make_ledger(close_time=0)) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_negative_close_time(self) -> None:
        with pytest.raises(InvalidTimestampError) as exc_info:
            extract_close_time(_make_ledger(close_time=-5))
        assert exc_info.value.value == -5

    def test_last_representable_close_time(self) -> None:
        assert extract_close_time(_make_ledger(close_time=_LAST_REPRESENTABLE)) == datetime(
            9999, 12, 31, 23, 59, 59, tzinfo=UTC
        )

    @pytest.mark.parametrize("close_time", [_LAST_REPRESENTABLE + 1, 2**40, 2**63 - 1])
    def test_close_time_beyond_datetime_range(self, close_time: int) -> None:
        with pytest.raises(InvalidTimestampError) as exc_info:
            extract_close_time(_make_ledger(close_time=close_time))
        assert exc_info.value.value == close_time

    def test_unsupported_version(self) -> None:
        with pytest.raises(UnsupportedLedgerFormatError) as exc_info:
            extract_close_time(_make_ledger(version=1))
        assert exc_info.value.version == 1

    def test_missing_v0_body(self) -> None:
        with pytest.raises(UnsupportedLedgerFormatError):
            extract_close_time(LedgerCloseMeta(version=0))

    def test_errors_write_nothing_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(UnsupportedLedgerFormatError):
            extract_close_time(_make_ledger(version=2))
        assert capsys.readouterr().out == ""

    @given(close_time=st.integers(min_value=0, max_value=2**33))
    def test_second_resolution(self, close_time: int) -> None:
        close = extract_close_time(_make_ledger(close_time=close_time))
        assert close.microsecond == 0
        assert int(close.timestamp()) == close_time


class TestFormatting:
    @given(time_point=st.integers(max_value=-1))
    def test_negative_time_point(self, time_point: int) -> None:
        with pytest.raises(InvalidTimestampError):
            time_point_to_utc(time_point)

    def test_hash_to_hex(self) -> None:
        assert hash_to_hex(bytes(range(32))) == "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"

    def test_hash_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="32 bytes"):
            hash_to_hex(b"\x00" * 31)

    @pytest.mark.parametrize(
        ("stroops", "expected"),
        [(0, 0.0), (1, 0.0000001), (10_000_000, 1.0), (-25_000_000, -2.5), (123_456_789, 12.3456789)],
    )
    def test_stroops_to_real(self, stroops: int, expected: float) -> None:
        assert stroops_to_real(stroops) == expected


class TestAccountAddress:
    def test_zero_key(self) -> None:
        account = MuxedAccount(ed25519=bytes(32))
        assert account_address(account) == "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"

    def test_muxed_id_is_dropped(self) -> None:
        key = bytes(range(32))
        assert account_address(MuxedAccount(ed25519=key, id=42)) == account_address(MuxedAccount(ed25519=key))

    @given(key=st.binary(min_size=32, max_size=32))
    def test_address_shape(self, key: bytes) -> None:
        address = account_address(MuxedAccount(ed25519=key))
        assert len(address) == 56
        assert address.startswith("G")

    def test_rejects_short_key(self) -> None:
        with pytest.raises(ValueError, match="32 bytes"):
            MuxedAccount(ed25519=bytes(31))
