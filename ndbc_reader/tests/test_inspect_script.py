"""Tests for the inspect_ndbc command-line entry point."""

from __future__ import annotations

import pandas as pd

from ndbc_reader.scripts.inspect_ndbc import main


TEXT = "\n".join(
    [
        "#YY  MM DD hh mm WDIR WSPD GST  PRES",
        "#yr  mo dy hr mn degT m/s  m/s   hPa",
        "2014 01 01 00 50 320  6.0  7.0 1024.4",
        "2014 01 01 01 50 999  5.0  6.5 1024.9",
    ]
)


def test_main_prints_summary(tmp_path, capsys) -> None:
    p = tmp_path / "46042h2014.txt"
    p.write_text(TEXT + "\n")
    assert main([str(p)]) == 0
    out = capsys.readouterr().out
    assert "2 data rows, 9 fields" in out
    assert "wdir" in out
    assert "[info] units row detected" in out


def test_main_writes_csv(tmp_path) -> None:
    p = tmp_path / "46042h2014.txt"
    p.write_text(TEXT + "\n")
    out = tmp_path / "out.csv"
    assert main([str(p), "--csv", str(out)]) == 0
    df = pd.read_csv(out)
    assert list(df.columns)[:2] == ["time", "year"]
    assert len(df) == 2
    assert pd.isna(df["wdir"].iloc[1])


def test_main_reports_errors(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.txt")]) == 2
    p = tmp_path / "bad.txt"
    p.write_text("YYYY FOO\n2008 1\n")
    assert main([str(p)]) == 2
    assert "FOO" in capsys.readouterr().out
    assert main([str(p), "--lenient"]) == 0
