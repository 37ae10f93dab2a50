"""
Inspect an NDBC standard meteorological file from the command line.

Prints one summary line per parsed field (finite count, min, max) followed by the
reader diagnostics, and optionally exports the record as CSV.

Examples
--------
    python -m ndbc_reader.scripts.inspect_ndbc 46042h2008.txt
    python -m ndbc_reader.scripts.inspect_ndbc 46042h2008.txt --majority --csv out.csv
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np

from ndbc_reader.errors import NdbcFormatError
from ndbc_reader.ingest.readers_ndbc import NdbcReaderConfig, parse_buoy_file
from ndbc_reader.models.record import BuoyRecord


def summarize(record: BuoyRecord) -> List[str]:
    lines = [f"{record.n_rows} data rows, {len(record)} fields"]
    for name in record:
        v = record[name]
        finite = v[np.isfinite(v)]
        if finite.size:
            lines.append(f"  {name:<6s} n={finite.size:<7d} min={finite.min():<10.6g} max={finite.max():.6g}")
        else:
            lines.append(f"  {name:<6s} n=0")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    p = argparse.ArgumentParser(
        prog="python -m ndbc_reader.scripts.inspect_ndbc",
        description="Parse an NDBC standard meteorological file and print a per-field summary.",
    )
    p.add_argument("file", help="NDBC stdmet text file")
    p.add_argument(
        "--majority",
        action="store_true",
        help="Decide multi-value columns by majority vote instead of requiring all rows to agree",
    )
    p.add_argument("--lenient", action="store_true", help="Skip unknown header labels instead of failing")
    p.add_argument("--csv", default=None, help="Write the parsed record (with a 'time' column) to this CSV file")

    ns = p.parse_args(list(argv) if argv is not None else None)

    cfg = NdbcReaderConfig(
        arity_policy="majority" if ns.majority else "all",
        strict_headers=not ns.lenient,
    )
    try:
        record = parse_buoy_file(ns.file, cfg)
    except (FileNotFoundError, NdbcFormatError) as e:
        print(f"[error] {e}")
        return 2

    for line in summarize(record):
        print(line)
    for w in record.warnings:
        print(f"[info] {w}")

    if ns.csv:
        df = record.to_dataframe()
        try:
            df.insert(0, "time", record.timestamps())
        except NdbcFormatError as e:
            print(f"[info] no time column: {e}")
        out = Path(ns.csv).expanduser()
        df.to_csv(out, index=False)
        print(f"[info] wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
