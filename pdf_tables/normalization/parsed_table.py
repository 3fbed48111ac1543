# ==============================================
# ParsedTable (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of table normalization.
#
# ENUMS:
# ------
# - ColumnType(str, Enum): STRING, NUMBER, DATE, BOOLEAN
#     Inferred type of a column.
#
# CLASSES:
# --------
# - ColumnSpec (dataclass)
#     How one raw header became one typed column.
#
#     Attributes:
#     -----------
#     - original_key: str         → Header key as emitted by the extractor
#     - sanitized_name: str       → Identifier-safe column name
#     - inferred_type: ColumnType → Winning type after sampling
#
# - ParsedTable (frozen dataclass)
#     The typed table handed to downstream analysis.
#
#     Attributes:
#     -----------
#     - columns: list[str]                 → Column names, first-seen order
#     - rows: list[dict]                   → One dict per record, keyed by column
#     - column_types: dict[str, ColumnType]
#
#     Methods:
#     --------
#     - empty() -> ParsedTable (classmethod)
#     - to_dict() -> dict       → {"columns", "rows", "columnTypes"}
#
# STORAGE NOTE:
# -------------
#   Only NUMBER columns hold native values (int / float). BOOLEAN and
#   DATE columns keep their cleaned strings; their column_types entry
#   is advisory metadata for consumers.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class ColumnType(str, Enum):
    """
    Inferred column types, listed in inference precedence order
    (STRING is the fallback).
    """
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    STRING = "string"


@dataclass(frozen=True)
class ColumnSpec:
    """Derivation record for a single column."""

    original_key: str
    sanitized_name: str
    inferred_type: ColumnType = ColumnType.STRING


@dataclass(frozen=True)
class ParsedTable:
    """
    Strictly typed table built once from one array of raw records.

    Every row has exactly the keys in `columns`; values are None or
    match the column's storage type (see STORAGE NOTE above).
    """

    columns: List[str] = field(default_factory=list)
    rows: List[Dict[str, Any]] = field(default_factory=list)
    column_types: Dict[str, ColumnType] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ParsedTable":
        return cls(columns=[], rows=[], column_types={})

    @property
    def is_empty(self) -> bool:
        return not self.columns

    def column(self, name: str) -> List[Optional[Any]]:
        """Return all values of one column, in row order."""
        return [row.get(name) for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the wire form used by analysis consumers.

        Returns:
            A JSON-serializable dictionary with fresh containers
        """
        return {
            "columns": list(self.columns),
            "rows": [dict(row) for row in self.rows],
            "columnTypes": {
                name: column_type.value
                for name, column_type in self.column_types.items()
            },
        }
