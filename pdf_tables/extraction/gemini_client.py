# ==============================================
# GeminiClient
# ==============================================
#
# PURPOSE:
#   Thin HTTP client for the Gemini `generateContent` REST endpoint.
#   Sends one PDF (inline, base64) plus a text prompt and returns the
#   model's raw text answer.
#
# WHY THIS CLASS EXISTS:
#   The extractor needs exactly one call: "here is a PDF, answer in
#   JSON". Keeping the wire details here lets PdfTableExtractor take
#   any object with a generate_json() method (tests pass a fake).
#
# CLASS: GeminiClient
# -------------------
#   Stateful: holds a requests.Session.
#
#   Constructor:
#   ------------
#   - __init__(api_key, model, base_url, timeout_seconds, session=None)
#   - from_config(config: GeminiConfig) (classmethod)
#
#   Methods:
#   --------
#   - generate_json(pdf_bytes: bytes, prompt: str) -> str
#       POST models/{model}:generateContent with
#       responseMimeType=application/json. Returns the text of the
#       first candidate. Raises ExtractionError on any failure.
#
#   - close() -> None
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with GeminiClient(...) as client:` usage.
#
# ==============================================

import base64
from typing import Optional

import requests

from pdf_tables.config import GeminiConfig, DEFAULT_GEMINI_BASE_URL, DEFAULT_GEMINI_MODEL


class ExtractionError(RuntimeError):
    """Raised when the extraction service cannot produce a usable answer."""


class GeminiClient:
    PDF_MIME_TYPE = "application/pdf"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_BASE_URL,
        timeout_seconds: float = 120.0,
        session: Optional[requests.Session] = None
    ):
        # Store connection params. The session is created lazily.
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._session = session

    @classmethod
    def from_config(cls, config: GeminiConfig) -> "GeminiClient":
        return cls(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate_json(self, pdf_bytes: bytes, prompt: str) -> str:
        if not self.is_configured:
            raise ExtractionError("GEMINI_API_KEY is not configured")

        try:
            response = self._get_session().post(
                self.endpoint,
                params={"key": self.api_key},
                json=self._build_payload(pdf_bytes, prompt),
                timeout=self.timeout_seconds
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise ExtractionError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise ExtractionError(f"Gemini returned a non-JSON envelope: {e}") from e

        return self._extract_text(body)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def _build_payload(self, pdf_bytes: bytes, prompt: str) -> dict:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {
                            "inline_data": {
                                "mime_type": self.PDF_MIME_TYPE,
                                "data": base64.b64encode(pdf_bytes).decode("ascii"),
                            }
                        },
                        {"text": prompt},
                    ],
                }
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
            },
        }

    def _extract_text(self, body: dict) -> str:
        candidates = body.get("candidates") if isinstance(body, dict) else None
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            raise ExtractionError("Gemini response has no candidates")

        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            parts = []
        return "".join(
            part["text"]
            for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False  # Don't suppress exceptions
