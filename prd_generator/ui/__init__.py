"""UI module for Streamlit web interface."""

from prd_generator.ui.api_client import APIClient
from prd_generator.ui.controller import ClientController
from prd_generator.ui.state import (
    ControllerPhase,
    ControllerState,
    DocumentState,
    IdeaListState,
)
from prd_generator.ui.utils import (
    build_download_filename,
    build_prd_prompt,
    truncate_text,
)

__all__ = [
    "APIClient",
    "ClientController",
    "ControllerPhase",
    "ControllerState",
    "DocumentState",
    "IdeaListState",
    "build_download_filename",
    "build_prd_prompt",
    "truncate_text",
]
