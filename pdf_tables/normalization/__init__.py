# ==============================================
# NORMALIZATION
# ==============================================
#
# This package turns the raw JSON rows returned by the document
# extractor into a strictly typed ParsedTable.
#
# Modules:
# --------
# - value_cleaner.py    → Clean a single cell (commas, "(Approx.)", NIL/NA/dashes)
# - column_namer.py     → Sanitize header keys into unique column names
# - type_detector.py    → Per-value predicates and column type inference
# - parsed_table.py     → ColumnType, ColumnSpec, ParsedTable
# - table_normalizer.py → The full records -> ParsedTable pipeline
#
# ==============================================

from .value_cleaner import ValueCleaner
from .column_namer import ColumnNamer
from .type_detector import TypeDetector
from .parsed_table import ColumnType, ColumnSpec, ParsedTable
from .table_normalizer import TableNormalizer, convert_json_to_parsed_data

__all__ = [
    "ValueCleaner",
    "ColumnNamer",
    "TypeDetector",
    "ColumnType",
    "ColumnSpec",
    "ParsedTable",
    "TableNormalizer",
    "convert_json_to_parsed_data",
]
