from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple
import io
import re

import numpy as np
import pandas as pd

from ndbc_reader.errors import FormatError
from ndbc_reader.ingest.header import has_alpha


def _token_spans(line: str) -> List[Tuple[int, int]]:
    return [(m.start(), m.end()) for m in re.finditer(r"\S+", line)]


def _occupied_runs(lines: Sequence[str]) -> List[Tuple[int, int]]:
    """Maximal runs of character positions holding a non-blank character in at least one line."""
    width = max((len(s) for s in lines), default=0)
    if width == 0:
        return []
    grid = np.array([list(s.ljust(width)) for s in lines], dtype="<U1")
    occupied = (grid != " ").any(axis=0)

    runs: List[Tuple[int, int]] = []
    start = None
    for pos, used in enumerate(occupied):
        if used and start is None:
            start = pos
        elif not used and start is not None:
            runs.append((start, pos))
            start = None
    if start is not None:
        runs.append((start, width))
    return runs


def infer_colspecs(lines: Sequence[str]) -> List[Tuple[int, int]]:
    """
    Infer fixed-width column bounds (0-based, half-open) anchored on the header line.

    Header token spans and the data value runs (positions occupied in any data line;
    the units line, if any, is left out) are merged wherever they overlap, so each
    header token claims the data values written under it whichever way they are
    aligned. A data run no header token overlaps joins the nearest headed column; a
    header token with no data under it keeps its own span, so an all-blank column
    still yields empty cells.
    """
    if not lines:
        return []
    body = list(lines[1:])
    if body and has_alpha(body[0].split()):
        body = body[1:]

    spans = [(a, b, True) for a, b in _token_spans(lines[0])]
    spans += [(a, b, False) for a, b in _occupied_runs(body)]
    spans.sort(key=lambda s: (s[0], s[1]))

    groups: List[List] = []  # [start, end, has_header]
    for a, b, is_header in spans:
        if groups and a < groups[-1][1]:
            groups[-1][1] = max(groups[-1][1], b)
            groups[-1][2] = groups[-1][2] or is_header
        else:
            groups.append([a, b, is_header])

    headed = [g for g in groups if g[2]]
    for g in groups:
        if g[2]:
            continue
        # nearest headed column by gap; ties go left
        target = min(
            headed,
            key=lambda h: (max(h[0] - g[1], g[0] - h[1], 0), h[0] > g[0]),
        )
        target[0] = min(target[0], g[0])
        target[1] = max(target[1], g[1])

    return [(int(g[0]), int(g[1])) for g in headed]


def tokenize_lines(lines: Sequence[str]) -> List[List[str]]:
    """
    Split text lines into a rectangular grid of string tokens.

    If every line has the same number of whitespace separated tokens, that split is
    used. Otherwise the lines are read as a fixed-width table with column bounds from
    infer_colspecs(); blank fields become empty strings and a field may hold several
    blank separated numbers when its header token spans them.
    """
    lines = [s.expandtabs(8).rstrip() for s in lines]
    lines = [s for s in lines if s.strip()]
    if not lines:
        raise FormatError("empty table: no non-blank lines.")

    split = [s.split() for s in lines]
    if len({len(t) for t in split}) == 1:
        return split

    colspecs = infer_colspecs(lines)
    buf = io.StringIO("\n".join(lines))
    df = pd.read_fwf(buf, colspecs=colspecs, header=None, dtype=str, keep_default_na=False)
    df = df.fillna("")
    return [[str(v).strip() for v in row] for row in df.itertuples(index=False, name=None)]


def read_column_table(path: str | Path) -> List[List[str]]:
    """Read a whole text file and tokenize it with tokenize_lines()."""
    p = Path(path).expanduser()
    if not p.exists() or not p.is_file():
        raise FileNotFoundError(f"Cannot find file {path}")
    text = p.read_text(errors="replace")
    return tokenize_lines(text.splitlines())
