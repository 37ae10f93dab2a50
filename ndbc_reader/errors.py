"""Exception types raised by the readers.

All of them derive from ``ValueError`` so callers that already guard file
ingestion with ``except ValueError`` keep working. Missing input files raise
the builtin ``FileNotFoundError``.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Malformed call arguments (e.g. column widths and type flags disagree)."""


class NdbcFormatError(ValueError):
    """Base class for problems found in the content of a buoy file."""


class FormatError(NdbcFormatError):
    """Structurally invalid table: ragged rows, too few lines, arity mismatch."""


class HeaderMismatchError(NdbcFormatError):
    """A resolved header label has no entry in the field alias table."""

    def __init__(self, label: str, message: str | None = None):
        self.label = label
        super().__init__(message or f"Unknown column header: {label}")
