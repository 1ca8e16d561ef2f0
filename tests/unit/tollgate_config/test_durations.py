"""Unit tests for expiration string parsing."""

from datetime import timedelta

import pytest

from tollgate_config import parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("15m", timedelta(minutes=15)),
            ("7d", timedelta(days=7)),
            ("1h", timedelta(hours=1)),
            ("30s", timedelta(seconds=30)),
            ("2w", timedelta(weeks=2)),
            ("900", timedelta(seconds=900)),
            (900, timedelta(seconds=900)),
            (" 15m ", timedelta(minutes=15)),
        ],
    )
    def test_valid_values(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "m", "15x", "1.5h", "-5m", "15 minutes", "0", "0d", 0, -1, True],
    )
    def test_invalid_values_raise(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)
