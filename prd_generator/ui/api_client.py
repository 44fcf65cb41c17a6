"""API client for communicating with the FastAPI backend."""

import logging

import httpx

from prd_generator.config import get_settings
from prd_generator.ui.utils import build_prd_prompt

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


def extract_error_message(error: Exception) -> str:
    """Get a user-facing message from a failed request.

    Args:
        error: Exception raised by the client.

    Returns:
        The server's ``error`` field when present, otherwise the exception text.
    """
    if isinstance(error, httpx.HTTPStatusError):
        try:
            message = error.response.json().get("error")
        except (ValueError, AttributeError):
            message = None
        if message:
            return message
    return str(error) or "Something went wrong."


class APIClient:
    """Client for the PRD generation API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API server. Defaults to settings.api_url.
            timeout: Request timeout in seconds. Defaults to settings.api_timeout.
            transport: Optional httpx transport (used in tests).
        """
        settings = get_settings()
        self.base_url = base_url or settings.api_url
        self.timeout = timeout or settings.api_timeout
        self._transport = transport

    def _client(self, timeout: float | None = None) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=timeout or self.timeout,
            transport=self._transport,
        )

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            with self._client(timeout=5.0) as client:
                response = client.get("/health")
                return response.status_code == 200
        except httpx.RequestError:
            return False

    def fetch_ideas(self) -> list[str]:
        """Fetch a fresh list of idea phrases.

        Returns:
            Idea phrases in model order (may be empty).

        Raises:
            httpx.HTTPStatusError: If the request fails.
        """
        with self._client() as client:
            response = client.post(GENERATE_PATH, json={"prdIdeas": True})
            response.raise_for_status()
            ideas = response.json().get("ideas") or []
        logger.debug(f"Fetched {len(ideas)} ideas")
        return ideas

    def generate(self, prompt: str) -> str:
        """Generate a document for a full prompt.

        Args:
            prompt: Document-generation prompt.

        Returns:
            Generated Markdown text.

        Raises:
            httpx.HTTPStatusError: If the request fails.
        """
        with self._client() as client:
            response = client.post(GENERATE_PATH, json={"prompt": prompt})
            response.raise_for_status()
            return response.json().get("result") or ""

    def generate_prd(self, phrase: str) -> str:
        """Generate a PRD for an idea phrase.

        Args:
            phrase: Selected idea phrase.

        Returns:
            Generated Markdown text.

        Raises:
            httpx.HTTPStatusError: If the request fails.
        """
        return self.generate(build_prd_prompt(phrase))
