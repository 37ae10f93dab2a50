"""Tests for the fixed-width column splitter."""

from __future__ import annotations

import numpy as np
import pytest

from ndbc_reader.errors import InvalidArgumentError
from ndbc_reader.ingest.fixed_width import column_bounds, fill_numeric, split_fixed_width


ROWS = ["AB123", "CD 45", "EF789"]


# -----------------------------------------------------------------------
# Shape and positional slicing
# -----------------------------------------------------------------------


def test_split_mixed_columns() -> None:
    cells = split_fixed_width(ROWS, [2, 3], [False, True])
    assert cells[:, 0].tolist() == ["AB", "CD", "EF"]
    assert cells[:, 1].tolist() == [123.0, 45.0, 789.0]


def test_split_fast_mode_same_result_on_clean_input() -> None:
    cells = split_fixed_width(ROWS, [2, 3], [False, True], fast=True)
    assert cells[:, 1].tolist() == [123.0, 45.0, 789.0]


def test_output_shape_matches_rows_and_widths() -> None:
    rows = ["2008 1 1 0 180", "2008 1 1 1 190", "2008 1 1 2 200", "2008 1 1 3 210"]
    widths = [4, 2, 2, 2, 4]
    cells = split_fixed_width(rows, widths, [True] * 5)
    assert cells.shape == (len(rows), len(widths))


def test_string_columns_reconstruct_rows() -> None:
    rows = ["2008 01 01 00  180  5.0", "2008 01 01 01   90 12.5"]
    widths = [4, 3, 3, 3, 5, 5]
    cells = split_fixed_width(rows, widths, [False] * len(widths))
    for row, sliced in zip(rows, cells):
        rebuilt = "".join(row[a:b] for a, b in column_bounds(widths))
        assert rebuilt == row[: sum(widths)]
        assert [s.strip() for s in sliced] == [row[a:b].strip() for a, b in column_bounds(widths)]


def test_column_bounds_prefix_sum() -> None:
    assert column_bounds([2, 3, 1]) == [(0, 2), (2, 5), (5, 6)]


def test_short_rows_are_padded() -> None:
    cells = split_fixed_width(["AB1", "CD"], [2, 3], [False, True])
    assert cells[0, 1] == 1.0
    assert cells[1, 1] is None


def test_block_string_input() -> None:
    cells = split_fixed_width("AB123\nCD 45\n", [2, 3], [False, True])
    assert cells.shape == (2, 2)
    assert cells[1, 1] == 45.0


# -----------------------------------------------------------------------
# Numeric conversion
# -----------------------------------------------------------------------


def test_fast_mode_ignores_trailing_garbage() -> None:
    cells = split_fixed_width([" 12.5xyz"], [8], [True], fast=True)
    assert cells[0, 0] == 12.5


def test_fast_mode_never_substitutes_zero() -> None:
    cells = split_fixed_width(["abc  ", "     ", "-    "], [5], [True], fast=True)
    assert all(c is None for c in cells[:, 0])


def test_normal_mode_empty_cell_is_none() -> None:
    cells = split_fixed_width(["A   ", "B  7"], [1, 3], [False, True])
    assert cells[0, 1] is None
    assert cells[1, 1] == 7.0


def test_normal_mode_rejects_trailing_garbage() -> None:
    cells = split_fixed_width(["12x"], [3], [True])
    assert cells[0, 0] is None


def test_normal_mode_multiple_numbers() -> None:
    cells = split_fixed_width(["1 0 1"], [5], [True])
    np.testing.assert_array_equal(cells[0, 0], [1.0, 0.0, 1.0])


def test_normal_mode_does_not_evaluate_expressions() -> None:
    cells = split_fixed_width(["2*3", "1+1"], [3], [True])
    assert cells[0, 0] is None
    assert cells[1, 0] is None


# -----------------------------------------------------------------------
# Argument validation
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "widths, is_numeric",
    [
        ([], []),
        ([2, 3], [True]),
        ([2, 0], [True, True]),
        ([2, -1], [True, True]),
        ([2.0, 3], [True, True]),
        ([2, 3], [1, 0]),
        (5, True),
    ],
)
def test_invalid_column_spec(widths, is_numeric) -> None:
    with pytest.raises(InvalidArgumentError):
        split_fixed_width(ROWS, widths, is_numeric)


def test_numpy_column_spec_accepted() -> None:
    cells = split_fixed_width(ROWS, np.array([2, 3]), np.array([False, True]))
    assert cells[2, 1] == 789.0


# -----------------------------------------------------------------------
# fill_numeric
# -----------------------------------------------------------------------


def test_fill_numeric_replaces_missing() -> None:
    cells = split_fixed_width(["  1  2", "     3", "  4 x "], [3, 3], [True, True], fast=True)
    mat = fill_numeric(cells)
    assert mat.dtype == np.float64
    np.testing.assert_array_equal(mat[:, 0], [1.0, np.nan, 4.0])
    np.testing.assert_array_equal(mat[:, 1], [2.0, 3.0, np.nan])


def test_fill_numeric_rejects_strings() -> None:
    cells = split_fixed_width(ROWS, [2, 3], [False, True])
    with pytest.raises(InvalidArgumentError):
        fill_numeric(cells)
    np.testing.assert_array_equal(fill_numeric(cells[:, 1]).ravel(), [123.0, 45.0, 789.0])
