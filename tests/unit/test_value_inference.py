from __future__ import annotations

import pytest

from csvnest.services.inference import infer_value


@pytest.mark.parametrize("text", ["", " ", "\t", "   \t  "])
def test_blank_is_none(text):
    assert infer_value(text) is None


@pytest.mark.parametrize(
    "text, expected",
    [("true", True), ("false", False), ("TRUE", True), ("False", False), ("tRuE", True)],
)
def test_boolean_literals_any_case(text, expected):
    assert infer_value(text) is expected


@pytest.mark.parametrize("text, expected", [("0", 0), ("42", 42), ("-7", -7), ("+3", 3), ("007", 7)])
def test_integers(text, expected):
    value = infer_value(text)
    assert value == expected
    assert type(value) is int


def test_large_integer_stays_integer():
    value = infer_value("123456789012345678901234567890")
    assert type(value) is int


@pytest.mark.parametrize(
    "text, expected",
    [("1.5", 1.5), ("-0.25", -0.25), (".5", 0.5), ("3.", 3.0), ("1e3", 1000.0), ("2.5E-3", 0.0025)],
)
def test_floats(text, expected):
    value = infer_value(text)
    assert type(value) is float
    assert value == pytest.approx(expected)


def test_integer_preferred_over_float():
    assert type(infer_value("10")) is int


@pytest.mark.parametrize(
    "text",
    ["1,000", "1_000", "nan", "NaN", "inf", "Infinity", "-inf", "1e999", "0x1F", "１２", "1.2.3", "yes", "abc"],
)
def test_non_invariant_numbers_fall_back_to_string(text):
    assert infer_value(text) == text


def test_string_is_trimmed_verbatim():
    assert infer_value("  Tokyo  ") == "Tokyo"


def test_boolean_never_becomes_number():
    assert infer_value("true") is True
    assert infer_value("1") == 1
    assert type(infer_value("1")) is int
