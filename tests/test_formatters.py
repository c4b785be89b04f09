from datetime import datetime, timedelta, timezone

import pytest

from softflow.utils.formatters import (
    capitalize_words,
    format_currency,
    format_date,
    format_file_size,
    format_number,
    format_percentage,
    format_phone_number,
    format_relative_time,
    truncate_text,
)

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def ago(**kwargs) -> str:
    return (NOW - timedelta(**kwargs)).isoformat()


def test_format_currency_known_code():
    assert format_currency(0, "USD") == "$0.00"
    assert format_currency(1234.5, "USD") == "$1,234.50"
    assert format_currency("99.999", "EUR") == "€100.00"
    assert format_currency(-5, "USD") == "-$5.00"


def test_format_currency_unknown_code_falls_back():
    assert format_currency(1234.5, "XXX") == "XXX 1234.50"


def test_format_phone_number():
    assert format_phone_number("1234567890") == "(123) 456-7890"
    assert format_phone_number("11234567890") == "+1 (123) 456-7890"
    assert format_phone_number("123-456-7890") == "(123) 456-7890"
    assert format_phone_number("12345") == "12345"
    assert format_phone_number("21234567890") == "21234567890"


def test_truncate_text():
    assert truncate_text("hello world", 5) == "hello..."
    assert truncate_text("hi", 5) == "hi"
    assert truncate_text("hello", 5) == "hello"


def test_capitalize_words():
    assert capitalize_words("hello WORLD from softflow") == "Hello World From Softflow"


def test_format_number():
    assert format_number(1234567) == "1,234,567"
    assert format_number(0) == "0"


def test_format_file_size():
    assert format_file_size(0) == "0 Bytes"
    assert format_file_size(512) == "512 Bytes"
    assert format_file_size(1024) == "1 KB"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(1024 ** 3) == "1 GB"
    assert format_file_size(5 * 1024 ** 5) == "5120 TB"


def test_format_percentage():
    assert format_percentage(42.5) == "42.5%"
    assert format_percentage(100) == "100.0%"
    assert format_percentage(33.333) == "33.3%"


def test_format_date():
    assert format_date("2024-03-05") == "Mar 5, 2024"
    assert format_date("not a date") == "not a date"
    assert format_date(None) == ""
    assert format_date(20240305) == "20240305"


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=59), "just now"),
        (timedelta(seconds=60), "1 minute ago"),
        (timedelta(minutes=2), "2 minutes ago"),
        (timedelta(minutes=59, seconds=59), "59 minutes ago"),
        (timedelta(minutes=60), "1 hour ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(hours=24), "1 day ago"),
        (timedelta(days=2), "2 days ago"),
        (timedelta(days=29), "29 days ago"),
        (timedelta(days=30), "1 month ago"),
        (timedelta(days=60), "2 months ago"),
        (timedelta(days=359), "11 months ago"),
        (timedelta(days=360), "1 year ago"),
        (timedelta(days=720), "2 years ago"),
    ],
)
def test_format_relative_time_boundaries(delta, expected):
    assert format_relative_time((NOW - delta).isoformat(), now=NOW) == expected


def test_format_relative_time_accepts_zulu_suffix():
    stamp = ago(minutes=5).replace("+00:00", "Z")
    assert format_relative_time(stamp, now=NOW) == "5 minutes ago"
