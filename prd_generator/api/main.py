"""FastAPI application for idea and PRD generation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from prd_generator.api.models import (
    ErrorResponse,
    GenerateRequest,
    IdeasResponse,
    ResultResponse,
)
from prd_generator.chains.idea_generator import IdeaGeneratorChain
from prd_generator.chains.prd_writer import PRDWriterChain
from prd_generator.config import get_settings

settings = get_settings()

# Configure logging for Cloud Run
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

PROMPT_REQUIRED_MESSAGE = "Prompt is required."
GENERIC_ERROR_MESSAGE = "Something went wrong."
INVALID_BODY_MESSAGE = "Request body must be valid JSON."

# Global instances (initialized on startup)
idea_generator: IdeaGeneratorChain | None = None
prd_writer: PRDWriterChain | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and cleanup resources."""
    global idea_generator, prd_writer

    logger.info("Initializing API resources...")
    try:
        idea_generator = IdeaGeneratorChain()
        prd_writer = PRDWriterChain()
    except Exception:
        logger.exception("Failed to initialize completion service")

    yield

    logger.info("Cleaning up API resources...")


app = FastAPI(
    title="PRD Generator API",
    description="Generates product ideas and product requirements documents",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return request validation failures in the ``{error}`` shape."""
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        return _error_response(400, INVALID_BODY_MESSAGE)
    # A missing body or unusable fields leaves no prompt to work with
    return _error_response(400, PROMPT_REQUIRED_MESSAGE)


app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post(
    "/api/generate",
    response_model=None,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate(body: GenerateRequest) -> IdeasResponse | ResultResponse | JSONResponse:
    """Generate an idea list or a PRD.

    Args:
        body: ``prdIdeas`` for idea-list mode, otherwise ``prompt``.

    Returns:
        ``{"ideas": [...]}`` or ``{"result": "..."}`` on success,
        ``{"error": "..."}`` with status 400 or 500 on failure.
    """
    try:
        if body.prd_ideas:
            if idea_generator is None:
                return _error_response(500, "Idea generator not initialized")
            ideas = await idea_generator.agenerate()
            return IdeasResponse(ideas=ideas)

        if not body.prompt:
            return _error_response(400, PROMPT_REQUIRED_MESSAGE)

        if prd_writer is None:
            return _error_response(500, "PRD writer not initialized")
        result = await prd_writer.awrite(body.prompt)
        return ResultResponse(result=result)
    except Exception as e:
        logger.exception("Error calling completion service")
        return _error_response(500, str(e) or GENERIC_ERROR_MESSAGE)
