"""Strict numeric-literal parsing for text cells.

Only plain floating-point literals are accepted (optional sign, digits, optional
fraction, optional exponent with 'e', 'E', 'd' or 'D'), plus 'inf'/'nan' in any
case. Nothing is ever evaluated as an expression.
"""

from __future__ import annotations

from typing import Optional
import re

import numpy as np


_NUMBER = r"(?:\d+\.?\d*|\.\d+)(?:[eEdD][+-]?\d+)?"
_WORD = r"(?:inf(?:inity)?|nan)"
_FLOAT = rf"[+-]?(?:{_NUMBER}|{_WORD})"
_FLOAT_RE = re.compile(rf"^{_FLOAT}$", flags=re.IGNORECASE)
# 'inf'/'nan' must not be the start of a longer word ('info', 'nanny')
_LEADING_RE = re.compile(rf"^\s*([+-]?(?:{_NUMBER}|{_WORD}(?![A-Za-z])))", flags=re.IGNORECASE)
_SEP_RE = re.compile(r"[\s,]+")


def _to_float(token: str) -> float:
    # Fortran-style exponent (1.0D+03)
    return float(token.replace("d", "e").replace("D", "e"))


def parse_leading(text: str) -> Optional[float]:
    """
    Parse the leading numeric token of ``text``; trailing characters are ignored.

    Returns None when the text is blank or does not start with a number. A
    failed parse never turns into 0.0.
    """
    m = _LEADING_RE.match(text)
    if not m:
        return None
    return _to_float(m.group(1))


def parse_numbers(text: str) -> Optional[np.ndarray]:
    """
    Parse every blank/comma separated literal of ``text`` into a 1-D float64 array.

    Returns None for blank text or when any token is not a numeric literal.
    """
    stripped = text.strip()
    if not stripped:
        return None
    tokens = [t for t in _SEP_RE.split(stripped) if t]
    if not all(_FLOAT_RE.match(t) for t in tokens):
        return None
    return np.array([_to_float(t) for t in tokens], dtype=np.float64)
