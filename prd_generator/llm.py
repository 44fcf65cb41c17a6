"""LLM factory for the completion service.

Creates ChatVertexAI instances with an explicit output budget and explicitly
injected credentials:
- ideas: short budget sized for ~20 one-line ideas
- prd: larger budget sized for a multi-section document
"""

import json
import logging

from google.oauth2 import service_account
from langchain_google_vertexai import ChatVertexAI

from prd_generator.config import Settings, get_settings

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]


def get_credentials(settings: Settings) -> service_account.Credentials | None:
    """Build service account credentials from settings.

    Args:
        settings: Application settings.

    Returns:
        Credentials from the inline JSON key or key file, or None to fall back
        to Application Default Credentials.
    """
    if settings.service_account_key:
        info = json.loads(settings.service_account_key)
        return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    if settings.service_account_file:
        return service_account.Credentials.from_service_account_file(
            settings.service_account_file, scopes=SCOPES
        )
    return None


def get_llm(
    max_output_tokens: int,
    temperature: float | None = None,
    settings: Settings | None = None,
) -> ChatVertexAI:
    """Get an LLM instance with the given output budget.

    Args:
        max_output_tokens: Maximum number of tokens the model may generate.
        temperature: Override default temperature. If None, uses settings.llm_temperature.
        settings: Settings to build from. Defaults to the cached settings.

    Returns:
        ChatVertexAI instance configured with the output budget and credentials.

    Examples:
        >>> llm = get_llm(max_output_tokens=256)
    """
    settings = settings or get_settings()
    temp = temperature if temperature is not None else settings.llm_temperature

    kwargs = {
        "model_name": settings.llm_model,
        "location": settings.google_location,
        "temperature": temp,
        "max_output_tokens": max_output_tokens,
    }
    if settings.google_project_id:
        kwargs["project"] = settings.google_project_id

    credentials = get_credentials(settings)
    if credentials is not None:
        kwargs["credentials"] = credentials
    else:
        logger.debug("No service account configured, using default credentials")

    return ChatVertexAI(**kwargs)
