"""Tests for date, amount and encoding helpers."""

from datetime import date

import pytest

from meisai.utils import decode_document, month_key, month_range, parse_date, parse_yen


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025/06/15", date(2025, 6, 15)),
        ("2025/6/1", date(2025, 6, 1)),
        ("2025-06-15", date(2025, 6, 15)),
        (" 2025/06/15 ", date(2025, 6, 15)),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    "value", ["", "   ", "2025/13/40", "2025/06", "6/15", "15", "June", "2025"]
)
def test_parse_date_invalid(value):
    with pytest.raises(ValueError):
        parse_date(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("5000", 5000),
        ("10,000", 10000),
        ("-1,200", -1200),
        ("￥3,000", 3000),
        ("3,000円", 3000),
        (" 800 ", 800),
    ],
)
def test_parse_yen(value, expected):
    assert parse_yen(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "1.5", "五千"])
def test_parse_yen_invalid(value):
    with pytest.raises(ValueError):
        parse_yen(value)


def test_month_key():
    assert month_key(date(2025, 6, 15)) == "2025-06"


def test_month_range():
    assert month_range("2025-06") == (date(2025, 6, 1), date(2025, 6, 30))
    assert month_range("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_range("2025-12") == (date(2025, 12, 1), date(2025, 12, 31))


@pytest.mark.parametrize("value", ["2025-6", "2025/06", "2025-00", "2025-13", "June"])
def test_month_range_invalid(value):
    with pytest.raises(ValueError):
        month_range(value)


def test_decode_utf8():
    assert decode_document("ご利用日".encode("utf-8")) == "ご利用日"


def test_decode_utf8_strips_bom():
    assert decode_document("ご利用日".encode("utf-8-sig")) == "ご利用日"


def test_decode_cp932_fallback():
    assert decode_document("ご利用先など,ＪＣＢ".encode("cp932")) == "ご利用先など,ＪＣＢ"
