# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
import os
import sys
import logging
from unittest.mock import AsyncMock

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from exam_generator.utils.config import settings
from exam_generator.services import llm_client

TEST_TOKEN = "test-github-pat-value"

SAMPLE_QUESTIONS = [
    {"type": "open-ended", "question": "Explain photosynthesis.", "answer": "Plants turn light into chemical energy."},
    {
        "type": "multiple-choice",
        "question": "Which organelle holds chlorophyll?",
        "options": ["Nucleus", "Chloroplast", "Ribosome", "Vacuole"],
        "answer": "Chloroplast",
    },
    {"type": "true-false", "question": "Roots perform photosynthesis.", "answer": "False"},
]


def make_request_body(**overrides):
    body = {
        "subject": "Biology",
        "topics": ["Photosynthesis", "Cells"],
        "difficulty": "medium",
        "language": "en",
        "questionCounts": {"open-ended": 1, "multiple-choice": 1, "true-false": 1},
    }
    body.update(overrides)
    return body


# --- Settings Fixture ---
@pytest.fixture(autouse=True)
def configure_settings(request, monkeypatch):
    """
    Gives every test a known credential and default behaviour, and a fresh
    LLM client. Tests marked 'llm_integration' keep the real environment.
    """
    if "llm_integration" not in request.keywords:
        monkeypatch.setattr(settings, "github_pat", TEST_TOKEN)
    monkeypatch.setattr(settings, "strict_validation", False)
    llm_client.reset_llm_client()
    yield
    llm_client.reset_llm_client()


# --- LLM Mock Fixture ---
@pytest.fixture
def mock_complete(monkeypatch):
    """Replaces the model call; set .return_value or .side_effect per test."""
    mock = AsyncMock(return_value="```json\n[]\n```")
    monkeypatch.setattr("exam_generator.services.llm_client.complete", mock)
    logger.info("Patched llm_client.complete with an AsyncMock.")
    return mock


# --- TestClient Fixture ---
@pytest.fixture
def client():
    from exam_generator.main import app
    with TestClient(app) as c:
        yield c
