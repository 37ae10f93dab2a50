from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ndbc_reader.errors import FormatError, HeaderMismatchError, InvalidArgumentError
from ndbc_reader.ingest.header import ARITY_POLICIES, column_arity, detect_header_rows, resolve_labels
from ndbc_reader.ingest.numeric import parse_numbers
from ndbc_reader.ingest.tokenizer import read_column_table
from ndbc_reader.models.fields import lookup_field
from ndbc_reader.models.record import BuoyRecord


# Standard NDBC missing-data codes. A genuine 99 or 999 reading cannot be told apart
# from the code and is lost as well.
NDBC_SENTINELS: Tuple[float, ...] = (99.0, 999.0)


@dataclass(frozen=True)
class NdbcReaderConfig:
    """
    Reader configuration for NDBC standard meteorological text files.

    sentinels:
      values replaced by NaN anywhere in the data matrix (exact float equality,
      so 99.9 is kept while 99.00 is replaced).

    arity_policy:
      - "all": a column holds several sub-columns only if every row's cell parsed
               to more than one number (legacy behaviour).
      - "majority": the most common per-row count wins; tolerant of a stray row.

    strict_headers:
      - True: an unknown header label raises HeaderMismatchError.
      - False: the column is skipped and a warning is recorded.

    min_data_rows:
      fewer data rows than this raises FormatError.
    """
    sentinels: Tuple[float, ...] = NDBC_SENTINELS
    arity_policy: str = "all"
    strict_headers: bool = True
    min_data_rows: int = 0

    def __post_init__(self):
        if self.arity_policy not in ARITY_POLICIES:
            raise InvalidArgumentError(
                f"arity_policy must be one of {ARITY_POLICIES}, got {self.arity_policy!r}"
            )
        if int(self.min_data_rows) < 0:
            raise InvalidArgumentError("min_data_rows must be >= 0")


def replace_sentinels(mat: np.ndarray, sentinels: Sequence[float] = NDBC_SENTINELS) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (copy of mat with sentinel values set to NaN, boolean mask of replaced cells).

    Idempotent: NaN never equals a sentinel, so a second pass replaces nothing.
    """
    out = np.array(mat, dtype=np.float64, copy=True)
    hit = np.isin(out, np.asarray(tuple(sentinels), dtype=np.float64))
    out[hit] = np.nan
    return out, hit


def _parse_cells(rows: Sequence[Sequence[str]], first_row: int, warnings: List[str]) -> List[List[np.ndarray]]:
    """Convert every data cell to a 1-D float array; blank or malformed cells become [nan]."""
    nan_cell = np.array([np.nan])
    parsed: List[List[np.ndarray]] = []
    bad: Dict[int, Tuple[int, str, int]] = {}  # col -> (first row no, first token, count)

    for r, row in enumerate(rows):
        cells: List[np.ndarray] = []
        for c, token in enumerate(row):
            text = token if token.strip() else "NaN"
            values = parse_numbers(text)
            if values is None:
                row_no, first_tok, n = bad.get(c, (first_row + r, token, 0))
                bad[c] = (row_no, first_tok, n + 1)
                values = nan_cell
            cells.append(values)
        parsed.append(cells)

    for c in sorted(bad):
        row_no, token, n = bad[c]
        warnings.append(
            f"column {c + 1}: {n} unparseable cell(s) set to NaN (first at row {row_no}: '{token}')"
        )
    return parsed


def _flatten(
    parsed: Sequence[Sequence[np.ndarray]],
    header: Sequence[str],
    arities: Sequence[int],
    first_row: int,
) -> np.ndarray:
    offsets = np.concatenate([[0], np.cumsum(arities)]).astype(int)
    mat = np.empty((len(parsed), int(offsets[-1])), dtype=np.float64)
    for r, cells in enumerate(parsed):
        for c, values in enumerate(cells):
            a = int(arities[c])
            lo, hi = offsets[c], offsets[c + 1]
            if values.size == a:
                mat[r, lo:hi] = values
            elif values.size == 1 and np.isnan(values[0]):
                mat[r, lo:hi] = np.nan
            else:
                raise FormatError(
                    f"row {first_row + r}: column '{header[c]}' has {values.size} value(s), expected {a}."
                )
    return mat


class NdbcStandardMetReader:
    """
    Reads National Data Buoy Center standard meteorological files (*.txt, stdmet).

    Contract:
      - Row 0 is the header; row 1 is a units row if it holds letters.
      - Blank cells, malformed cells and the 99/999 codes become NaN.
      - Every resolved header label must be a known alias (see models.fields),
        unless strict_headers is disabled.
      - All output arrays have one entry per data row.
    """

    def __init__(self, config: Optional[NdbcReaderConfig] = None):
        self.config = config or NdbcReaderConfig()

    def read(self, path: str | Path) -> BuoyRecord:
        p = Path(path).expanduser()
        if not p.exists() or not p.is_file():
            raise FileNotFoundError(f"Cannot find file {path}")
        table = read_column_table(p)
        return self.parse_table(table, source_path=p.resolve())

    def parse_table(self, table: Sequence[Sequence[str]], source_path: Optional[Path] = None) -> BuoyRecord:
        """Parse an already tokenized table (list of rows of string tokens)."""
        cfg = self.config
        warnings: List[str] = []

        layout = detect_header_rows(table)
        header = layout.header
        if layout.units is not None:
            warnings.append(f"units row detected: {' '.join(layout.units)}")

        rows = table[layout.data_start:]
        first_row = layout.data_start + 1
        for r, row in enumerate(rows):
            if len(row) != len(header):
                raise FormatError(
                    f"row {first_row + r} has {len(row)} columns, header has {len(header)}."
                )
        if len(rows) < int(cfg.min_data_rows):
            raise FormatError(f"{len(rows)} data row(s) found, at least {cfg.min_data_rows} required.")

        parsed = _parse_cells(rows, first_row, warnings)

        arities = [
            column_arity([cells[c].size for cells in parsed], cfg.arity_policy)
            for c in range(len(header))
        ]
        labels = resolve_labels(header, arities)
        for token, a in zip(header, arities):
            if a > 1:
                warnings.append(f"header token '{token}' covers {a} data columns; split into labels")

        mat = _flatten(parsed, header, arities, first_row)

        mat, hit = replace_sentinels(mat, cfg.sentinels)
        n_hit = hit.sum(axis=0)
        if n_hit.any():
            per_col = ", ".join(f"{labels[j]}({int(n)})" for j, n in enumerate(n_hit) if n)
            codes = "/".join(f"{s:g}" for s in cfg.sentinels)
            warnings.append(f"replaced {int(n_hit.sum())} missing-value code(s) ({codes}) with NaN: {per_col}")

        fields: Dict[str, np.ndarray] = {}
        for j, label in enumerate(labels):
            spec = lookup_field(label)
            if spec is None:
                if cfg.strict_headers:
                    raise HeaderMismatchError(label)
                warnings.append(f"unknown column header '{label}' skipped")
                continue
            if spec.name in fields:
                warnings.append(f"field '{spec.name}' repeated (label '{label}'); later column kept")
            col = mat[:, j].copy()
            col.flags.writeable = False
            fields[spec.name] = col

        return BuoyRecord(
            source_path=source_path,
            fields=MappingProxyType(fields),
            n_rows=len(rows),
            labels=tuple(labels),
            units=layout.units,
            header_rows=layout.header_rows,
            warnings=tuple(warnings),
        )


def parse_buoy_file(path: str | Path, config: Optional[NdbcReaderConfig] = None) -> BuoyRecord:
    """Read one NDBC standard meteorological file into a BuoyRecord."""
    return NdbcStandardMetReader(config).read(path)
