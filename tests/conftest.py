import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient


# --- Canned Gemini responses ---

NEWS_ITEMS = [
    {"title": "Framework ships AI code review", "summary": "A popular framework added model-assisted reviews."},
    {"title": "Browser adds on-device LLM API", "summary": "Pages can now call a local model from JavaScript."},
]

NEWS_JSON = json.dumps(NEWS_ITEMS)

GROUNDING_CHUNKS = [
    {"web": {"uri": "https://example.com/review", "title": "example.com"}},
    {"web": {"uri": "", "title": "missing uri"}},
    {"web": None},
    None,
    {"web": {"uri": "https://news.example.org/llm", "title": "news.example.org"}},
]


def make_response(text, chunks=None):
    """Build a stand-in for a google-genai GenerateContentResponse."""
    response = MagicMock()
    response.text = text
    if chunks is None:
        response.candidates = []
    else:
        candidate = MagicMock()
        candidate.grounding_metadata.grounding_chunks = chunks
        response.candidates = [candidate]
    return response


@pytest.fixture
def mock_settings(mocker):
    settings = MagicMock(api_key="test-key")
    mocker.patch("aiwebnews.services.news.get_settings", return_value=settings)
    return settings


@pytest.fixture
def mock_genai_client(mocker):
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock()
    mocker.patch("aiwebnews.services.news.genai.Client", return_value=mock_client)
    return mock_client


@pytest.fixture
def mock_gemini(mock_settings, mock_genai_client):
    """Configured key plus a mocked Gemini client; set generate_content.return_value."""
    return mock_genai_client.aio.models.generate_content


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from aiwebnews.main import api
    return TestClient(api)
