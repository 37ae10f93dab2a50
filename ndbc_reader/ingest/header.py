"""Header detection and header/data column reconciliation for NDBC tables.

Header detection is a three-state machine driven by the second table row only:

    AwaitPrimaryHeader -> AwaitSecondaryHeaderOrData -> ParsingData

Row 0 is always the primary header. Row 1 is a units row (``#yr mo dy hr mn
degT ...``) when it holds any alphabetic character, in which case data starts
at row 2; otherwise it is already data. There is no backtracking.

Reconciliation handles files where one header token sits above several numeric
sub-columns (the tokenizer then yields cells such as ``"1 0 1"``). The arity of
each column is decided by column_arity() and the labels of multi-value columns
are the alphabetic runs of their header token.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import re

from ndbc_reader.errors import FormatError, InvalidArgumentError


ARITY_POLICIES = ("all", "majority")

_ALPHA_RE = re.compile(r"[A-Za-z]")
_ALPHA_RUN_RE = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True)
class HeaderLayout:
    """
    header: primary header tokens, one per table column
    units: units-row tokens, or None for single-header files
    data_start: index of the first data row in the table
    """
    header: Tuple[str, ...]
    units: Optional[Tuple[str, ...]]
    data_start: int

    @property
    def header_rows(self) -> int:
        return self.data_start


def has_alpha(tokens: Sequence[str]) -> bool:
    return any(_ALPHA_RE.search(t) for t in tokens)


def detect_header_rows(table: Sequence[Sequence[str]]) -> HeaderLayout:
    if len(table) < 2:
        raise FormatError(f"table has {len(table)} line(s); need a header and at least one more line.")

    # AwaitPrimaryHeader
    header = tuple(str(t).strip() for t in table[0])
    # AwaitSecondaryHeaderOrData
    second = table[1]
    if has_alpha(second):
        return HeaderLayout(header=header, units=tuple(str(t).strip() for t in second), data_start=2)
    # ParsingData from row 1 on
    return HeaderLayout(header=header, units=None, data_start=1)


def column_arity(counts: Sequence[int], policy: str = "all") -> int:
    """
    Decide how many numeric sub-columns one table column holds.

    counts: number of values parsed from the column's cell in each data row.

    policy="all": the column is multi-value only if every row has more than one
        value; its arity is then the most common count. Otherwise the arity is 1.
    policy="majority": the arity is the most common count.

    Ties between equally common counts go to the lower count. A column with no
    data rows has arity 1. Rows that disagree with the returned arity are handled
    by the caller.
    """
    if policy not in ARITY_POLICIES:
        raise InvalidArgumentError(f"arity policy must be one of {ARITY_POLICIES}, got {policy!r}")
    if not counts:
        return 1

    tally = Counter(int(c) for c in counts)
    best = max(tally.values())
    most_common = min(c for c, n in tally.items() if n == best)

    if policy == "all":
        return most_common if all(c > 1 for c in counts) else 1
    return most_common


def split_header_token(token: str) -> List[str]:
    """Alphabetic runs of a header token, e.g. 'WD/WSPD' -> ['WD', 'WSPD']."""
    return _ALPHA_RUN_RE.findall(token)


def resolve_labels(header: Sequence[str], arities: Sequence[int]) -> List[str]:
    """
    Expand header tokens to one label per numeric sub-column.

    Tokens of single-value columns are kept as-is (so '#YY' stays '#YY'); tokens of
    multi-value columns are replaced by their alphabetic runs, which must be exactly
    as many as the column's arity.
    """
    if len(header) != len(arities):
        raise FormatError(f"header has {len(header)} tokens but {len(arities)} arities were given.")

    labels: List[str] = []
    for token, arity in zip(header, arities):
        if arity <= 1:
            labels.append(token.strip())
            continue
        parts = split_header_token(token)
        if len(parts) != arity:
            raise FormatError(
                f"header token '{token}' spans {arity} data columns but yields {len(parts)} label(s): {parts}"
            )
        labels.extend(parts)
    return labels
