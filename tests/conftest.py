"""
conftest.py — shared fixtures for the demo tests.

No test talks to the real Gemini endpoint: the API key is forced to a
dummy value and requests are patched per test.
"""

import pytest

from src import config
from src.shared import gemini_client


@pytest.fixture(autouse=True)
def dummy_api_key(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_API_KEY", "test-key")
    monkeypatch.setattr(gemini_client, "GOOGLE_API_KEY", "test-key")
