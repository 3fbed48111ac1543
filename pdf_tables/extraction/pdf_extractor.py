# ==============================================
# PdfTableExtractor
# ==============================================
#
# PURPOSE:
#   "Extract" half of the extract-then-analyze workflow. Asks the
#   document model for the main table of a PDF and returns its rows
#   as raw JSON records (one dict per row, header cells as keys).
#
# FAILURE CONTRACT:
#   Every failure (no API key, missing file, HTTP error, empty or
#   unparsable answer) is reported on stdout and turned into [].
#   Callers never see an exception from this class.
#
# CLASS: PdfTableExtractor
# ------------------------
#   Constructor:
#   ------------
#   - __init__(client, response_parser=None, prompt=TABLE_EXTRACTION_PROMPT)
#       `client` is anything with generate_json(pdf_bytes, prompt) -> str.
#
#   Methods:
#   --------
#   - extract_from_buffer(pdf_bytes: bytes) -> list[dict]
#   - extract_from_file(path: str | Path) -> list[dict]
#
# ==============================================

from pathlib import Path
from typing import Any, List, Optional, Union

from .gemini_client import ExtractionError
from .response_parser import ResponseParser


TABLE_EXTRACTION_PROMPT = """You are an expert data extraction AI. Analyze this PDF.

Your single goal is to find the main data table in the document and return it as clean JSON.

Identify the largest, most significant table.

Use the table's header row as the keys for each object.

CLEAN THE DATA:

- Remove any commas from numbers (e.g., '237,706' becomes '237706').
- Remove any text like '(Approx.)' from values.
- Convert any dashes ('---'), 'NIL', or 'NA' to null.
- Trim all whitespace.

Convert every row of that table into a JSON object in an array.

If there are no clear tables, return an empty array.

Respond ONLY with the single JSON array: [ { ... }, { ... } ]"""


class PdfTableExtractor:
    """
    Extracts the main table of a PDF as a list of raw records.
    """

    def __init__(
        self,
        client: Any,
        response_parser: Optional[ResponseParser] = None,
        prompt: str = TABLE_EXTRACTION_PROMPT
    ):
        self._client = client
        self._response_parser = response_parser or ResponseParser()
        self._prompt = prompt

    def extract_from_buffer(self, pdf_bytes: bytes) -> List[Any]:
        """
        Extract table rows from in-memory PDF bytes.

        Args:
            pdf_bytes: Raw PDF content

        Returns:
            List of row records, [] on any failure
        """
        if self._client is None or not getattr(self._client, "is_configured", True):
            print("✗ Table extraction skipped: GEMINI_API_KEY is not configured")
            return []

        try:
            json_text = self._client.generate_json(pdf_bytes, self._prompt)
        except ExtractionError as e:
            print(f"✗ Error extracting table from PDF: {e}")
            return []

        if not json_text or not json_text.strip():
            print("⚠ Empty response from extractor for PDF extraction")
            return []

        records = self._response_parser.parse(json_text)
        if records is None:
            print("✗ Failed to parse JSON from extractor response")
            return []

        if self._response_parser.last_strategy != "direct":
            print(f"⚠ Recovered JSON array using '{self._response_parser.last_strategy}' strategy")

        return records

    def extract_from_file(self, path: Union[str, Path]) -> List[Any]:
        """
        Extract table rows from a PDF on disk.

        Args:
            path: Path to the PDF file

        Returns:
            List of row records, [] on any failure
        """
        pdf_path = Path(path)
        if not pdf_path.is_file():
            print(f"✗ PDF file not found: {pdf_path}")
            return []

        try:
            pdf_bytes = pdf_path.read_bytes()
        except OSError as e:
            print(f"✗ Could not read PDF file {pdf_path}: {e}")
            return []

        return self.extract_from_buffer(pdf_bytes)
