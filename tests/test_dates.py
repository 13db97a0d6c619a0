import pytest

from gedcomx7.builders.dates import (
    DateFormatError,
    date_value,
    epoch_millis_to_formal,
    format_formal_date,
)
from gedcomx7.gedcom7.serializer import serialize


def lines(node):
    return serialize(node, 1).splitlines()


def test_simple_dates():
    assert format_formal_date("+1900").payload == "1900"
    assert format_formal_date("+1900-05").payload == "MAY 1900"
    assert format_formal_date("+1900-05-06").payload == "6 MAY 1900"
    assert format_formal_date("A+1900").payload == "ABT 1900"


def test_bce_years():
    assert format_formal_date("-0100").payload == "101 BCE"
    assert format_formal_date("+0000").payload == "1 BCE"


def test_time_in_utc():
    node = format_formal_date("+1900-05-06T12:30:15Z")

    assert lines(node) == ["1 DATE 6 MAY 1900", "2 TIME 12:30:15Z"]


def test_time_with_zone_offset():
    node = format_formal_date("+1900-05-06T12:30-05:00")

    assert lines(node) == [
        "1 DATE 6 MAY 1900",
        "2 TIME 12:30",
        "2 PHRASE Time zone -05:00",
    ]


def test_ranges():
    assert format_formal_date("+1900/+1910").payload == "BET 1900 AND 1910"
    assert format_formal_date("+1900/").payload == "AFT 1900"
    assert format_formal_date("/+1910").payload == "BEF 1910"


def test_period_ranges():
    assert format_formal_date("+1900/+1910", period=True).payload == "FROM 1900 TO 1910"
    assert format_formal_date("+1900/", period=True).payload == "FROM 1900"
    assert format_formal_date("/+1910", period=True).payload == "TO 1910"


def test_approximate_range_keeps_original_as_phrase():
    node = format_formal_date("A+1900/+1910")

    assert node.payload == "BET 1900 AND 1910"
    assert node.find_first("PHRASE").payload == "gedcomx date: A+1900/+1910"


def test_recurrence_with_duration():
    node = format_formal_date("R3/+1900/P1Y")

    assert node.payload == "1900"
    assert node.find_first("PHRASE").payload == "repeats 3 times every 1 years"


def test_recurrence_between_dates():
    node = format_formal_date("R/+1900/+1902")

    assert node.find_first("PHRASE").payload == "repeats indefinitely every 2 years"


@pytest.mark.parametrize("text", ["1900", "+1900-13", "+1900/+1901/+1902/+1903", "X/+1900/P1Y"])
def test_malformed_dates_raise(text):
    with pytest.raises(DateFormatError):
        format_formal_date(text)


def test_epoch_millis():
    assert epoch_millis_to_formal(0) == "+1970-01-01T00:00:00.000Z"


def test_date_value_reports_unsupported(ctx, messages):
    node = date_value(ctx, "sometime")

    assert node.payload is None
    assert node.find_first("PHRASE").payload == "unsupported gedcomx data: sometime"
    assert len(messages) == 1
    assert "sometime" in messages[0]


def test_date_value_original_only(ctx):
    node = date_value(ctx, {"original": "about the war"})

    assert lines(node) == ["1 DATE", "2 PHRASE about the war"]


def test_date_value_formal_and_original(ctx):
    node = date_value(ctx, {"formal": "+1900-05-06", "original": "6th of May"})

    assert lines(node) == ["1 DATE 6 MAY 1900", "2 PHRASE 6th of May"]


def test_date_value_from_timestamp(ctx):
    node = date_value(ctx, 0)

    assert lines(node) == ["1 DATE 1 JAN 1970", "2 TIME 00:00:00.000Z"]


def test_date_value_empty(ctx):
    assert date_value(ctx, None) is None
    assert date_value(ctx, "") is None
    assert date_value(ctx, {}) is None
