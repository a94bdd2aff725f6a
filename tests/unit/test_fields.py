"""Test input normalisation helpers."""
import pytest

from tire_pickup.Core.Utils.fields import (
    coerce_tires_count,
    email_key,
    normalize_date_only,
    parse_calendar_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [("2026-11-03", "2026-11-03"), ("2026-13-45", "2026-13-45"), ("2026-1-3", None), (None, None), (20261103, None)],
)
def test_normalize_date_only_is_lexical(value, expected):
    assert normalize_date_only(value) == expected


def test_parse_calendar_date_rejects_impossible_dates():
    assert parse_calendar_date("2026-02-30") is None
    assert parse_calendar_date("2026-02-28").day == 28


@pytest.mark.parametrize("value, expected", [("7", 7), (7.9, 7), ("", 0), ("abc", 0), (float("inf"), 0), (-2, 0)])
def test_coerce_tires_count(value, expected):
    assert coerce_tires_count(value) == expected


def test_email_key_ignores_case_and_whitespace():
    assert email_key("  Dana@Acme.Test ") == "dana@acme.test"
    assert email_key(None) == ""
