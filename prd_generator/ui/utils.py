"""Utility functions for the Streamlit UI."""

PRD_PROMPT_TEMPLATE = (
    "Write a detailed Product Requirements Document (PRD) in Markdown format "
    "for the following idea: {phrase}"
)

# Both extensions carry identical Markdown content
DOWNLOAD_EXTENSIONS = ("md", "prd")
DOWNLOAD_MIME_TYPE = "text/markdown"


def build_prd_prompt(phrase: str) -> str:
    """Embed an idea phrase into the PRD prompt template.

    Args:
        phrase: Selected idea phrase.

    Returns:
        Full document-generation prompt.
    """
    return PRD_PROMPT_TEMPLATE.format(phrase=phrase)


def build_download_filename(phrase: str | None, ext: str) -> str:
    """Build the download file name for a document.

    Args:
        phrase: Selected idea phrase, or None.
        ext: File extension without the dot ("md" or "prd").

    Returns:
        File name derived from the phrase, "prd.<ext>" when nothing is selected.
    """
    stem = phrase or "prd"
    # Path separators would turn the name into a path
    stem = stem.replace("/", "-").replace("\\", "-")
    return f"{stem}.{ext}"


def truncate_text(text: str, max_length: int = 100) -> str:
    """Truncate text to max length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length before truncation.

    Returns:
        Truncated text with ellipsis if needed.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
