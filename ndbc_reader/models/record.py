from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from ndbc_reader.errors import FormatError


_DATE_FIELDS = ("year", "month", "day", "hour")


@dataclass(frozen=True)
class BuoyRecord:
    """
    In-memory representation of one NDBC standard meteorological file after parsing.

    Notes
    - fields maps canonical field names (see models.fields.FIELD_SPECS) to read-only float64 arrays.
    - Every array has length n_rows. Missing values (blank cells, 99/999 codes) are NaN.
    - labels are the resolved header labels, one per matrix column, in file order.
    - units holds the tokens of the units row when the file has one, else None.
    """
    source_path: Optional[Path]
    fields: Mapping[str, np.ndarray]
    n_rows: int
    labels: Tuple[str, ...] = ()
    units: Optional[Tuple[str, ...]] = None
    header_rows: int = 1
    warnings: Tuple[str, ...] = ()

    def __getitem__(self, name: str) -> np.ndarray:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def keys(self):
        return self.fields.keys()

    def to_dataframe(self) -> pd.DataFrame:
        """One float64 column per field, in file order."""
        return pd.DataFrame({k: np.asarray(v, dtype=np.float64) for k, v in self.fields.items()})

    def timestamps(self) -> pd.DatetimeIndex:
        """
        Observation times built from year/month/day/hour (+ minute when present).

        Two-digit years (pre-1999 'YY' files) are mapped to 19xx. Rows with any missing
        date component become NaT.
        """
        missing = [k for k in _DATE_FIELDS if k not in self.fields]
        if missing:
            raise FormatError(f"cannot build timestamps, missing fields: {', '.join(missing)}")

        year = np.array(self.fields["year"], dtype=np.float64)
        year = np.where(year < 100, year + 1900, year)
        minute = self.fields["min"] if "min" in self.fields else np.zeros(self.n_rows)
        parts = {
            "year": year,
            "month": self.fields["month"],
            "day": self.fields["day"],
            "hour": self.fields["hour"],
            "minute": minute,
        }

        valid = np.ones(self.n_rows, dtype=bool)
        for v in parts.values():
            valid &= np.isfinite(v)

        stamps = np.full(self.n_rows, np.datetime64("NaT"), dtype="datetime64[ns]")
        if valid.any():
            df = pd.DataFrame({k: np.asarray(v)[valid].astype(np.int64) for k, v in parts.items()})
            stamps[valid] = pd.to_datetime(df, errors="coerce").to_numpy(dtype="datetime64[ns]")
        return pd.DatetimeIndex(stamps)
