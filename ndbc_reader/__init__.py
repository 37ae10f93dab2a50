"""NDBC Reader -- Python tooling for National Data Buoy Center observation files.

This package provides tools for:
- Splitting fixed-width character blocks into typed columns
- Tokenizing whitespace or column-aligned text tables
- Reading NDBC standard meteorological files into numeric records
- Substituting the NDBC missing-value codes (99, 999, blank) with NaN

Key principles:
- No expression evaluation: cells are parsed with a strict float grammar
- No silent column guessing: header/data arity is checked explicitly
- Full traceability: every recovery step is recorded in the record warnings

Main subpackages:
- ingest: Tokenizer, fixed-width splitter, header reconciliation, readers
- models: Data models (BuoyRecord, FieldSpec alias table)
- scripts: Command-line inspection tool
"""

from ndbc_reader.errors import FormatError, HeaderMismatchError, InvalidArgumentError, NdbcFormatError
from ndbc_reader.ingest.fixed_width import split_fixed_width
from ndbc_reader.ingest.readers_ndbc import NdbcReaderConfig, NdbcStandardMetReader, parse_buoy_file
from ndbc_reader.models.record import BuoyRecord

__all__ = [
    "BuoyRecord",
    "FormatError",
    "HeaderMismatchError",
    "InvalidArgumentError",
    "NdbcFormatError",
    "NdbcReaderConfig",
    "NdbcStandardMetReader",
    "parse_buoy_file",
    "split_fixed_width",
]
