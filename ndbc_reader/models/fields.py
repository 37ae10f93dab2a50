from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class FieldSpec:
    """
    One entry of the header alias table.

    name: canonical field name used as key in BuoyRecord (e.g. 'wdir')
    aliases: header labels that map to this field, matched exactly (case-sensitive)
    description: human-readable meaning and unit, as documented by NDBC
    """
    name: str
    aliases: Tuple[str, ...]
    description: str = ""


# Standard meteorological fields. Order follows the column order of current NDBC files.
FIELD_SPECS: Tuple[FieldSpec, ...] = (
    FieldSpec("year", ("YY", "YYYY", "#YY"), "year (two-digit in pre-1999 files)"),
    FieldSpec("month", ("MM",), "month"),
    FieldSpec("day", ("DD",), "day of month"),
    FieldSpec("hour", ("hh",), "hour (UTC)"),
    FieldSpec("min", ("mm",), "minute"),
    FieldSpec("wdir", ("WD", "WDIR"), "wind direction (deg clockwise from true north)"),
    FieldSpec("wspd", ("WSPD",), "wind speed (m/s)"),
    FieldSpec("gust", ("GST",), "peak gust speed (m/s)"),
    FieldSpec("wvht", ("WVHT",), "significant wave height (m)"),
    FieldSpec("dpd", ("DPD",), "dominant wave period (s)"),
    FieldSpec("apd", ("APD",), "average wave period (s)"),
    FieldSpec("mwd", ("MWD",), "mean wave direction of the dominant period (deg from true north)"),
    FieldSpec("press", ("PRES", "BAR"), "sea level pressure (hPa)"),
    FieldSpec("atmp", ("ATMP",), "air temperature (Celsius)"),
    FieldSpec("wtmp", ("WTMP",), "sea surface temperature (Celsius)"),
    FieldSpec("dewp", ("DEWP",), "dewpoint temperature (Celsius)"),
    FieldSpec("vis", ("VIS",), "station visibility (statute miles)"),
    FieldSpec("tide", ("TIDE",), "water level relative to MLLW (ft)"),
)


def _build_alias_index(specs: Tuple[FieldSpec, ...]) -> Dict[str, FieldSpec]:
    index: Dict[str, FieldSpec] = {}
    for spec in specs:
        for alias in spec.aliases:
            if alias in index:
                raise ValueError(
                    f"alias '{alias}' declared by both '{index[alias].name}' and '{spec.name}'"
                )
            index[alias] = spec
    return index


_ALIAS_INDEX: Dict[str, FieldSpec] = _build_alias_index(FIELD_SPECS)


def lookup_field(label: str) -> Optional[FieldSpec]:
    """Return the FieldSpec whose alias set contains ``label``, or None."""
    return _ALIAS_INDEX.get(label)
