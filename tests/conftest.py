"""Pytest configuration and fixtures."""

import os

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    os.environ.setdefault("GOOGLE_PROJECT_ID", "")
    os.environ.setdefault("GOOGLE_LOCATION", "us-central1")
    os.environ.setdefault("API_URL", "http://localhost:8000")
    os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture
def mock_settings():
    """Provide settings for testing."""
    from prd_generator.config import Settings

    return Settings(
        google_project_id="test-project",
        google_location="us-central1",
        api_url="http://testserver",
    )


@pytest.fixture
def fake_llm():
    """Build a fake chat model that replies with the given responses in order."""

    def _make(*responses: str) -> FakeListChatModel:
        return FakeListChatModel(responses=list(responses))

    return _make
