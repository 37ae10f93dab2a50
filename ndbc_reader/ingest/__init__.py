"""Ingest package - tokenizing, splitting and reading buoy text files.

This package handles:
- Strict numeric-literal parsing of text cells (no expression evaluation)
- Splitting fixed-width character blocks into typed columns
- Tokenizing whitespace or column-aligned text tables
- Detecting header/units rows and reconciling header tokens with data columns
- Reading NDBC standard meteorological files into BuoyRecord objects

Key entry points:
- split_fixed_width: positional column splitter
- read_column_table: file -> grid of string tokens
- NdbcStandardMetReader / parse_buoy_file: file -> BuoyRecord

Design principle:
- Malformed cells degrade to NaN and are reported in the record warnings
- Structural problems (ragged rows, unknown headers) raise immediately
"""
