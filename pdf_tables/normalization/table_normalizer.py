# ==============================================
# TableNormalizer
# ==============================================
#
# PURPOSE:
#   Convert the raw JSON rows produced by the document extractor into
#   a ParsedTable: sanitized column names, cleaned cells, inferred
#   column types and numeric cells for number columns.
#
# PIPELINE:
# ---------
#   1. derive_columns()  → keys of the first record → ColumnSpec list
#   2. _clean_rows()     → ValueCleaner on every cell of every record
#   3. _infer_types()    → TypeDetector on the first `sample_size` rows
#   4. _coerce_numbers() → number columns get int / float values
#
# GUARANTEES:
# -----------
#   - Never raises on malformed input; degrades to null cells and
#     string-typed columns instead.
#   - Records missing a key of the first record get None for it.
#   - Empty input, or a first record without usable keys, yields
#     ParsedTable.empty().
#
# ==============================================

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Dict, List, Optional

from .column_namer import ColumnNamer
from .parsed_table import ColumnSpec, ColumnType, ParsedTable
from .type_detector import TypeDetector
from .value_cleaner import ValueCleaner


class TableNormalizer:
    """
    Turns an array of raw extractor records into a typed ParsedTable.
    Stateless between calls apart from the ColumnNamer mapping registry.
    """

    DEFAULT_SAMPLE_SIZE = 100

    def __init__(
        self,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        column_namer: Optional[ColumnNamer] = None,
        value_cleaner: Optional[ValueCleaner] = None,
        type_detector: Optional[TypeDetector] = None
    ):
        self.sample_size = max(1, sample_size)
        self.column_namer = column_namer or ColumnNamer()
        self.value_cleaner = value_cleaner or ValueCleaner()
        self.type_detector = type_detector or TypeDetector()

    def normalize(self, records: Optional[List[Any]]) -> ParsedTable:
        """
        Build a ParsedTable from raw records.

        Args:
            records: Raw records as returned by the extractor

        Returns:
            ParsedTable (empty when there is nothing to type)
        """
        if not records:
            return ParsedTable.empty()

        specs = self.derive_columns(records)
        if not specs:
            return ParsedTable.empty()

        rows = self._clean_rows(records, specs)
        specs = self._infer_types(rows, specs)
        rows = self._coerce_numbers(rows, specs)

        return ParsedTable(
            columns=[spec.sanitized_name for spec in specs],
            rows=rows,
            column_types={spec.sanitized_name: spec.inferred_type for spec in specs}
        )

    def derive_columns(self, records: List[Any]) -> List[ColumnSpec]:
        """
        Derive the column set from the first record.

        Args:
            records: Raw records (only the first one is inspected)

        Returns:
            One ColumnSpec per usable key, typed STRING until inference
        """
        if not records or not isinstance(records[0], Mapping):
            return []

        keys = [key for key in records[0].keys() if key is not None]
        names = self.column_namer.sanitize_all(keys)

        return [
            ColumnSpec(original_key=key, sanitized_name=name)
            for key, name in zip(keys, names)
        ]

    def _clean_rows(self, records: List[Any], specs: List[ColumnSpec]) -> List[Dict[str, Any]]:
        cleaned_rows = []

        for record in records:
            source = record if isinstance(record, Mapping) else {}
            cleaned_rows.append({
                spec.sanitized_name: self.value_cleaner.clean(source.get(spec.original_key))
                for spec in specs
            })

        return cleaned_rows

    def _infer_types(self, rows: List[Dict[str, Any]], specs: List[ColumnSpec]) -> List[ColumnSpec]:
        sample_rows = rows[:self.sample_size]
        typed_specs = []

        for spec in specs:
            samples = [
                row[spec.sanitized_name]
                for row in sample_rows
                if row[spec.sanitized_name] is not None
            ]
            inferred = self.type_detector.infer_column_type(samples)
            typed_specs.append(replace(spec, inferred_type=inferred))

        return typed_specs

    def _coerce_numbers(self, rows: List[Dict[str, Any]], specs: List[ColumnSpec]) -> List[Dict[str, Any]]:
        number_columns = [
            spec.sanitized_name
            for spec in specs
            if spec.inferred_type == ColumnType.NUMBER
        ]
        if not number_columns:
            return rows

        final_rows = []
        for row in rows:
            new_row = dict(row)
            for name in number_columns:
                if new_row[name] is not None:
                    number = self.type_detector.to_number(new_row[name])
                    # Rows past the sample window may not parse; keep them as text
                    new_row[name] = number if number is not None else new_row[name]
            final_rows.append(new_row)

        return final_rows


def convert_json_to_parsed_data(records: Optional[List[Any]], sample_size: int = TableNormalizer.DEFAULT_SAMPLE_SIZE) -> ParsedTable:
    """Shortcut for TableNormalizer(sample_size).normalize(records)."""
    return TableNormalizer(sample_size=sample_size).normalize(records)
