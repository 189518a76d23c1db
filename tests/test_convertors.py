"""Tests for the unsigned 64-bit message ID path convertor."""

from __future__ import annotations

import re

import pytest

from message_service.controllers.convertors import MAX_MESSAGE_ID, UnsignedIntConvertor

ID_PATTERN = re.compile(f"^(?:{UnsignedIntConvertor.regex})$")


@pytest.mark.parametrize(
    "segment",
    [
        "0",
        "1",
        "007",
        "9999999999999999999",
        "10000000000000000000",
        "18446744073709551599",
        "18446744073709551610",
        str(MAX_MESSAGE_ID),
        "000" + str(MAX_MESSAGE_ID),
    ],
)
def test_pattern_accepts_in_range_ids(segment):
    assert ID_PATTERN.match(segment)
    assert UnsignedIntConvertor().convert(segment) == int(segment)


@pytest.mark.parametrize(
    "segment",
    [
        str(MAX_MESSAGE_ID + 1),
        "18446744073709551620",
        "18446744073709552615",
        "19000000000000000000",
        "20000000000000000000",
        "99999999999999999999",
        "100000000000000000000",
        "9" * 5000,
        "-1",
        "1.5",
        "abc",
        "",
    ],
)
def test_pattern_rejects_out_of_range_and_non_numeric_ids(segment):
    assert ID_PATTERN.match(segment) is None


def test_every_value_near_the_maximum_is_classified_correctly():
    for value in range(MAX_MESSAGE_ID - 1000, MAX_MESSAGE_ID + 1000):
        assert bool(ID_PATTERN.match(str(value))) is (value <= MAX_MESSAGE_ID)


def test_to_string_round_trips_and_rejects_out_of_range():
    convertor = UnsignedIntConvertor()

    assert convertor.to_string(42) == "42"
    with pytest.raises(ValueError):
        convertor.to_string(MAX_MESSAGE_ID + 1)
