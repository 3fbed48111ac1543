# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - sample_records   → raw rows as the extractor returns them
# - fake_client      → stand-in for GeminiClient (no network)
# - app_config       → AppConfig that never reads the environment
# ==============================================

import json

import pytest

from pdf_tables.config import AppConfig, GeminiConfig, NormalizerConfig


class FakeClient:
    """Records calls and replays a canned answer (or raises)."""

    def __init__(self, answer="[]", error=None, is_configured=True):
        self.answer = answer
        self.error = error
        self.is_configured = is_configured
        self.calls = []
        self.closed = False

    def generate_json(self, pdf_bytes, prompt):
        self.calls.append((pdf_bytes, prompt))
        if self.error is not None:
            raise self.error
        return self.answer

    def close(self):
        self.closed = True


@pytest.fixture
def sample_records():
    return [
        {"# ": "1", "Name of Scheme": "Ravi Kumar", "Amount (Rs.)": "237,706",
         "Sanctioned On": "2023-04-01", "Active": "true"},
        {"# ": "2", "Name of Scheme": "Anita Rao", "Amount (Rs.)": "1,234 (Approx.)",
         "Sanctioned On": "2023-05-17", "Active": "false"},
        {"# ": "3", "Name of Scheme": "NIL", "Amount (Rs.)": "---",
         "Sanctioned On": "NA", "Active": "-"},
    ]


@pytest.fixture
def fake_client_factory():
    return FakeClient


@pytest.fixture
def fake_client(sample_records):
    return FakeClient(answer=json.dumps(sample_records))


@pytest.fixture
def app_config():
    return AppConfig(
        gemini=GeminiConfig(api_key="test-key"),
        normalizer=NormalizerConfig(sample_size=100)
    )
