"""Tests for JSON value converters."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from indexarr.infrastructure.common.converters import (
    to_absolute_url,
    to_bool,
    to_datetime,
    to_int,
)


class TestToInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (42, 42),
            (0, 0),
            (12.0, 12),
            ("123", 123),
            (" 7 ", 7),
            ("1,234", 1234),
            ("-3", -3),
        ],
    )
    def test_valid(self, raw: object, expected: int) -> None:
        assert to_int(raw) == expected

    @pytest.mark.parametrize(
        "raw", [None, "", "abc", "--1", "-1-", "1-", "²", "٣", 1.5, True, False, [], {}]
    )
    def test_invalid(self, raw: object) -> None:
        assert to_int(raw) is None


class TestToBool:
    @pytest.mark.parametrize("raw", [True, 1, "1", "true", "Yes", " on "])
    def test_true(self, raw: object) -> None:
        assert to_bool(raw) is True

    @pytest.mark.parametrize("raw", [False, 0, "0", "false", "no", ""])
    def test_false(self, raw: object) -> None:
        assert to_bool(raw) is False

    def test_missing_is_false(self) -> None:
        assert to_bool(None) is False

    @pytest.mark.parametrize("raw", ["maybe", 1.0, [], {}])
    def test_unrecognized(self, raw: object) -> None:
        assert to_bool(raw) is None


class TestToAbsoluteUrl:
    def test_https(self) -> None:
        assert to_absolute_url(" https://img.example.org/p.jpg ") == (
            "https://img.example.org/p.jpg"
        )

    @pytest.mark.parametrize(
        "raw", [None, "", "poster.jpg", "/img/p.jpg", "ftp://x/p", "https://", 7]
    )
    def test_rejected(self, raw: object) -> None:
        assert to_absolute_url(raw) is None


class TestToDatetime:
    def test_offset_preserved(self) -> None:
        dt = to_datetime("2024-03-01T12:30:00+02:00")
        assert dt is not None
        assert dt.utcoffset() == timedelta(hours=2)

    def test_naive_is_utc(self) -> None:
        assert to_datetime("2024-03-01 12:30:00") == datetime(
            2024, 3, 1, 12, 30, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize("raw", [None, "", "yesterday", 1709296200])
    def test_invalid(self, raw: object) -> None:
        assert to_datetime(raw) is None
