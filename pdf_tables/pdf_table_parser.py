# ==============================================
# PdfTableParser: Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties extraction and normalization together into the
#   "Extract, then Analyze" workflow. Users interact with this
#   class only.
#
#   ┌──────────────────────────────────────────────┐
#   │               PdfTableParser                 │
#   │                                              │
#   │  ┌────────────────────────────────────────┐  │
#   │  │ EXTRACTION                             │  │
#   │  │  GeminiClient → PdfTableExtractor      │  │
#   │  └──────────────┬─────────────────────────┘  │
#   │                 │ raw records (list[dict])   │
#   │                 ▼                            │
#   │  ┌────────────────────────────────────────┐  │
#   │  │ NORMALIZATION                          │  │
#   │  │  ColumnNamer → ValueCleaner →          │  │
#   │  │  TypeDetector → ParsedTable            │  │
#   │  └────────────────────────────────────────┘  │
#   └──────────────────────────────────────────────┘
#
# CLASS: PdfTableParser
# ---------------------
#   Constructor:
#   ------------
#   - __init__(config=None, extractor=None, normalizer=None)
#       Builds a GeminiClient + PdfTableExtractor from config unless
#       an extractor is passed in.
#
#   Public Methods:
#   ---------------
#   - parse_buffer(pdf_bytes) -> ParsedTable
#   - parse_file(path) -> ParsedTable
#   - extract_records_from_file(path) -> list[dict]
#   - normalize(records) -> ParsedTable
#   - close() -> None
#
# ==============================================

from pathlib import Path
from typing import Any, List, Optional, Union

from pdf_tables.config import AppConfig, get_config
from pdf_tables.extraction.gemini_client import GeminiClient
from pdf_tables.extraction.pdf_extractor import PdfTableExtractor
from pdf_tables.normalization.parsed_table import ParsedTable
from pdf_tables.normalization.table_normalizer import TableNormalizer


class PdfTableParser:
    """
    Extracts the main table of a PDF and returns it as a ParsedTable.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        extractor: Optional[PdfTableExtractor] = None,
        normalizer: Optional[TableNormalizer] = None
    ):
        """
        Initialize the parser with its extraction and normalization parts.

        Args:
            config: Application configuration. If None, loads from environment.
            extractor: Pre-built extractor (e.g. wrapping a test double).
            normalizer: Pre-built normalizer.
        """
        self._config = config or get_config()

        self._client: Optional[GeminiClient] = None
        if extractor is None:
            self._client = GeminiClient.from_config(self._config.gemini)
            extractor = PdfTableExtractor(self._client)
        self._extractor = extractor

        self._normalizer = normalizer or TableNormalizer(
            sample_size=self._config.normalizer.sample_size
        )

    def parse_buffer(self, pdf_bytes: bytes) -> ParsedTable:
        """
        Extract and normalize the main table of in-memory PDF bytes.

        Returns:
            ParsedTable, empty when nothing could be extracted.
        """
        records = self._extractor.extract_from_buffer(pdf_bytes)
        return self.normalize(records)

    def parse_file(self, path: Union[str, Path]) -> ParsedTable:
        """
        Extract and normalize the main table of a PDF on disk.

        Returns:
            ParsedTable, empty when nothing could be extracted.
        """
        records = self.extract_records_from_file(path)
        return self.normalize(records)

    def extract_records_from_file(self, path: Union[str, Path]) -> List[Any]:
        return self._extractor.extract_from_file(path)

    def normalize(self, records: Optional[List[Any]]) -> ParsedTable:
        table = self._normalizer.normalize(records)

        if table.is_empty:
            print("⚠ No table rows to normalize")
        else:
            print(f"✓ Parsed table: {len(table.columns)} columns, {len(table.rows)} rows")

        return table

    def close(self) -> None:
        """Close the HTTP session of the owned client, if any."""
        if self._client is not None:
            self._client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False  # Don't suppress exceptions
