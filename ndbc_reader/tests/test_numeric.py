"""Tests for strict numeric-literal parsing."""

from __future__ import annotations

import math

import numpy as np
import pytest

from ndbc_reader.ingest.numeric import parse_leading, parse_numbers


@pytest.mark.parametrize(
    "text, expected",
    [
        ("180", 180.0),
        ("  -1.9 ", -1.9),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("1.0D+02", 100.0),
        ("+7", 7.0),
    ],
)
def test_parse_numbers_single(text: str, expected: float) -> None:
    v = parse_numbers(text)
    assert v is not None and v.shape == (1,)
    assert v[0] == pytest.approx(expected)


def test_parse_numbers_nan_and_inf() -> None:
    assert np.isnan(parse_numbers("NaN")[0])
    assert math.isinf(parse_numbers("-Inf")[0])


def test_parse_numbers_several_values() -> None:
    np.testing.assert_array_equal(parse_numbers("1 0  1"), [1.0, 0.0, 1.0])
    np.testing.assert_array_equal(parse_numbers("3,4"), [3.0, 4.0])


@pytest.mark.parametrize("text", ["", "   ", "abc", "1+1", "__import__('os')", "12x", "1 two"])
def test_parse_numbers_rejects(text: str) -> None:
    assert parse_numbers(text) is None


def test_parse_leading() -> None:
    assert parse_leading("  42abc") == 42.0
    assert parse_leading("-3.5e1 trailing") == -35.0
    assert parse_leading("") is None
    assert parse_leading("x42") is None


def test_parse_leading_words() -> None:
    assert parse_leading("info") is None
    assert parse_leading("nanny") is None
    assert math.isinf(parse_leading("Infinity"))
    assert math.isinf(parse_leading("-inf 3"))
    assert np.isnan(parse_leading("NaN,1"))
