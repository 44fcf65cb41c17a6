"""State management models for the Streamlit UI."""

from enum import Enum

from pydantic import BaseModel, Field


class ControllerPhase(str, Enum):
    """Phase of the two-stage ideas -> document flow."""

    IDLE = "idle"
    LOADING_IDEAS = "loading_ideas"
    IDEAS_READY = "ideas_ready"
    GENERATING_DOCUMENT = "generating_document"
    DOCUMENT_READY = "document_ready"


class IdeaListState(BaseModel):
    """State for the idea list."""

    phrases: list[str] = Field(default_factory=list, description="Idea phrases")
    is_loading: bool = Field(default=False, description="Idea list request in flight")
    has_loaded: bool = Field(default=False, description="Resolved at least once")
    error_message: str | None = Field(default=None, description="Last request error")
    request_seq: int = Field(default=0, description="Latest issued request number")


class DocumentState(BaseModel):
    """State for the selected idea and its generated document."""

    selected_phrase: str | None = Field(default=None, description="Selected idea phrase")
    content: str = Field(default="", description="Generated Markdown document")
    is_loading: bool = Field(default=False, description="Document request in flight")
    error_message: str | None = Field(default=None, description="Last request error")
    request_seq: int = Field(default=0, description="Latest issued request number")
    copied_at: float | None = Field(default=None, description="Clock time of last copy")


class ControllerState(BaseModel):
    """Full client state."""

    ideas: IdeaListState = Field(default_factory=IdeaListState)
    document: DocumentState = Field(default_factory=DocumentState)

    @property
    def phase(self) -> ControllerPhase:
        """Current phase derived from the loading flags and results."""
        if self.ideas.is_loading:
            return ControllerPhase.LOADING_IDEAS
        if not self.ideas.has_loaded:
            return ControllerPhase.IDLE
        if self.document.is_loading:
            return ControllerPhase.GENERATING_DOCUMENT
        if self.document.content:
            return ControllerPhase.DOCUMENT_READY
        return ControllerPhase.IDEAS_READY
