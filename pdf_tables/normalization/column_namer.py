# ==============================================
# ColumnNamer
# ==============================================
#
# PURPOSE:
#   Turn raw table headers (whatever the extractor used as JSON keys)
#   into identifier-safe column names.
#
# WHY THIS CLASS EXISTS:
#   Headers coming out of scanned documents are noisy:
#     - "Amount ", " Amount"         (stray whitespace)
#     - "#", "S.No.", "-- Total --"  (punctuation, decorations)
#     - "Date of Birth"              (internal spaces)
#   Downstream consumers need stable keys matching [A-Za-z0-9_]+.
#
# CLASS: ColumnNamer
# ------------------
#   Methods:
#   --------
#   - sanitize(name, position) -> str
#       Sanitize a single header. `position` is the 0-based column
#       index, used for the Column_<n> fallback.
#
#   - sanitize_all(names) -> list[str]
#       Sanitize every header of a table and resolve collisions.
#
#   - get_mappings() -> dict[str, str]
#       Original header -> final column name, for the last table.
#
# RULES:
# ------
#   1. Trim                                ("  Amount " -> "Amount")
#   2. Strip leading/trailing #, -, space  ("# Name -"  -> "Name")
#   3. Internal whitespace runs -> "_"     ("Unit Price" -> "Unit_Price")
#   4. Drop anything outside [A-Za-z0-9_]  ("S.No."     -> "SNo")
#   5. Empty result -> Column_<position+1> ("#"         -> "Column_1")
#   6. Already-taken name -> first free _2, _3, ... suffix
#
# ==============================================

import re
from typing import Any, Dict, List


class ColumnNamer:
    """
    Sanitizes raw header keys into unique identifier-safe column names.
    """

    EDGE_PATTERN = re.compile(r'^[#\-\s]+|[#\-\s]+$')
    WHITESPACE_PATTERN = re.compile(r'\s+')
    INVALID_CHARS_PATTERN = re.compile(r'[^a-zA-Z0-9_]')

    FALLBACK_TEMPLATE = "Column_{}"

    def __init__(self):
        """Initialize the namer with an empty mapping registry."""
        self._mappings: Dict[str, str] = {}

    def sanitize(self, name: Any, position: int) -> str:
        """
        Sanitize a single header key.

        Args:
            name: Raw header key (usually a string)
            position: 0-based column index

        Returns:
            Non-empty name matching [A-Za-z0-9_]+
        """
        cleaned = str(name if name is not None else "").strip()
        cleaned = self.EDGE_PATTERN.sub("", cleaned)
        cleaned = self.WHITESPACE_PATTERN.sub("_", cleaned)
        cleaned = self.INVALID_CHARS_PATTERN.sub("", cleaned)

        return cleaned or self.FALLBACK_TEMPLATE.format(position + 1)

    def sanitize_all(self, names: List[Any]) -> List[str]:
        """
        Sanitize the full header row of one table.

        Args:
            names: Raw header keys in column order

        Returns:
            Unique column names, same order and length as `names`
        """
        self._mappings = {}
        taken = set()
        result = []

        for position, name in enumerate(names):
            candidate = self._dedupe(self.sanitize(name, position), taken)
            taken.add(candidate)
            result.append(candidate)
            self._mappings[str(name)] = candidate

        return result

    def get_mappings(self) -> Dict[str, str]:
        """
        Get the header mappings of the last sanitized table.

        Returns:
            Dictionary mapping original headers to column names
        """
        return self._mappings.copy()

    def _dedupe(self, name: str, taken: set) -> str:
        if name not in taken:
            return name

        suffix = 2
        while f"{name}_{suffix}" in taken:
            suffix += 1
        return f"{name}_{suffix}"
