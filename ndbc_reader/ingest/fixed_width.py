"""Fixed-width column splitter.

Slices each row of a character block at positions given by a vector of column
widths, and optionally converts the numeric columns to float. Column ``i``
covers characters ``[sum(widths[:i]), sum(widths[:i+1]))``; no delimiter is
consulted.

Examples
--------
>>> from ndbc_reader.ingest.fixed_width import split_fixed_width
>>> cells = split_fixed_width(["AB123", "CD 45"], [2, 3], [False, True])
>>> cells[:, 0].tolist()
['AB', 'CD']
>>> cells[:, 1].tolist()
[123.0, 45.0]
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

import numpy as np

from ndbc_reader.errors import InvalidArgumentError
from ndbc_reader.ingest.numeric import parse_leading, parse_numbers


def _as_list(v) -> list:
    if isinstance(v, np.ndarray):
        return v.ravel().tolist()
    if v is None or isinstance(v, (str, bytes)) or np.isscalar(v):
        raise InvalidArgumentError(f"expected a vector, got scalar {v!r}.")
    return list(v)


def _validate_column_spec(widths: Sequence[int], is_numeric: Sequence[bool]) -> Tuple[List[int], List[bool]]:
    w = _as_list(widths)
    f = _as_list(is_numeric)

    if not w:
        raise InvalidArgumentError("Column width must be a non-empty vector of positive integers.")
    for x in w:
        if isinstance(x, (bool, np.bool_)) or not isinstance(x, (int, np.integer)) or int(x) <= 0:
            raise InvalidArgumentError(f"Column width must be a positive integer, got {x!r}.")
    if len(f) != len(w):
        raise InvalidArgumentError(
            f"is_numeric must be a boolean vector the same length as widths ({len(f)} != {len(w)})."
        )
    for x in f:
        if not isinstance(x, (bool, np.bool_)):
            raise InvalidArgumentError(f"is_numeric entries must be booleans, got {x!r}.")
    return [int(x) for x in w], [bool(x) for x in f]


def column_bounds(widths: Sequence[int]) -> List[Tuple[int, int]]:
    """Return 0-based half-open (start, end) character bounds for each column."""
    ends = np.cumsum(np.asarray(widths, dtype=np.int64))
    starts = np.concatenate([[0], ends[:-1]])
    return [(int(s), int(e)) for s, e in zip(starts, ends)]


def split_fixed_width(
    rows: Union[str, Sequence[str]],
    widths: Sequence[int],
    is_numeric: Sequence[bool],
    fast: bool = False,
) -> np.ndarray:
    """
    Split a block of fixed-width rows into a (n_rows, n_cols) object array of cells.

    Parameters
    ----------
    rows : sequence of str, or one str holding newline separated rows
        Rows shorter than ``sum(widths)`` are padded with blanks; characters beyond
        ``sum(widths)`` are ignored.
    widths : sequence of int
        Positive column widths.
    is_numeric : sequence of bool
        Same length as ``widths``. Numeric columns are converted to float,
        the others are returned as trimmed strings.
    fast : bool
        If True, numeric cells are parsed from their leading numeric token only
        (trailing characters ignored). Cells without a leading number become None.
        If False, the whole trimmed cell is parsed: one literal gives a float,
        several blank/comma separated literals give a 1-D float array, blank or
        unparseable cells give None.

    Raises
    ------
    InvalidArgumentError
        If widths / is_numeric are empty, of different lengths, or ill-typed.
    """
    w, isnum = _validate_column_spec(widths, is_numeric)
    if isinstance(rows, str):
        rows = rows.splitlines()

    bounds = column_bounds(w)
    total = bounds[-1][1]
    n_rows = len(rows)
    cells = np.empty((n_rows, len(w)), dtype=object)

    for r, raw in enumerate(rows):
        line = str(raw).ljust(total)
        for c, (start, end) in enumerate(bounds):
            text = line[start:end]
            if not isnum[c]:
                cells[r, c] = text.strip()
            elif fast:
                cells[r, c] = parse_leading(text)
            else:
                values = parse_numbers(text)
                if values is None:
                    cells[r, c] = None
                elif values.size == 1:
                    cells[r, c] = float(values[0])
                else:
                    cells[r, c] = values
    return cells


def fill_numeric(cells: np.ndarray, fill: float = np.nan) -> np.ndarray:
    """
    Convert a splitter block of numeric cells to a float64 matrix.

    None cells and multi-value cells are replaced by ``fill``. String cells are
    rejected: pass only the numeric columns.
    """
    block = np.asarray(cells, dtype=object)
    if block.ndim == 1:
        block = block.reshape(-1, 1)
    out = np.full(block.shape, fill, dtype=np.float64)
    for idx, cell in np.ndenumerate(block):
        if cell is None:
            continue
        if isinstance(cell, str):
            raise InvalidArgumentError(f"cell {idx} is a string ({cell!r}); select numeric columns only.")
        arr = np.ravel(np.asarray(cell, dtype=np.float64))
        if arr.size == 1:
            out[idx] = arr[0]
    return out
