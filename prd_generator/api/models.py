"""API request and response models."""

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Request model for the generate endpoint.

    One endpoint serves both modes: ``prdIdeas`` selects idea-list mode,
    otherwise ``prompt`` is used for document generation.
    """

    model_config = ConfigDict(populate_by_name=True)

    prd_ideas: bool | None = Field(
        default=False,
        alias="prdIdeas",
        description="Idea-list mode; prompt is ignored when true, null means false",
    )
    prompt: str | None = Field(
        default=None, description="Full document-generation prompt"
    )


class IdeasResponse(BaseModel):
    """Response model for idea-list mode."""

    ideas: list[str] = Field(default_factory=list, description="Idea phrases in model order")


class ResultResponse(BaseModel):
    """Response model for document mode."""

    result: str = Field(description="Generated Markdown document, unmodified")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(description="Error message")
