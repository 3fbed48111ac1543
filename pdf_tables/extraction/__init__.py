# ==============================================
# EXTRACTION
# ==============================================
#
# This package talks to the document model and returns the main
# table of a PDF as raw JSON records. Nothing here is needed to
# normalize records obtained some other way.
#
# Modules:
# --------
# - gemini_client.py   → requests-based client for Gemini generateContent
# - response_parser.py → Ordered JSON recovery strategies for model answers
# - pdf_extractor.py   → PDF bytes / path -> list of raw records
#
# ==============================================

from .gemini_client import GeminiClient, ExtractionError
from .response_parser import ResponseParser
from .pdf_extractor import PdfTableExtractor, TABLE_EXTRACTION_PROMPT

__all__ = [
    "GeminiClient",
    "ExtractionError",
    "ResponseParser",
    "PdfTableExtractor",
    "TABLE_EXTRACTION_PROMPT",
]
