"""Client controller for the ideas -> PRD flow.

Each flow is split into ``begin_*`` (records the user action and returns a
request number) and ``complete_*`` (applies a response). Responses carrying a
request number other than the latest issued for their category are dropped,
so the most recent user action always wins even when responses arrive out of
order.
"""

import logging
import time
from collections.abc import Callable

from prd_generator.ui.api_client import APIClient, extract_error_message
from prd_generator.ui.state import ControllerPhase, ControllerState
from prd_generator.ui.utils import DOWNLOAD_EXTENSIONS, build_download_filename

logger = logging.getLogger(__name__)


class ClientController:
    """Drives the idea list and document requests and holds their state."""

    def __init__(
        self,
        api_client: APIClient,
        copy_ack_seconds: float = 1.5,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the controller.

        Args:
            api_client: Client for the generate endpoint.
            copy_ack_seconds: How long the "copied" acknowledgment stays set.
            clock: Monotonic clock, injectable for tests.
        """
        self.api_client = api_client
        self.copy_ack_seconds = copy_ack_seconds
        self._clock = clock
        self.state = ControllerState()

    @property
    def phase(self) -> ControllerPhase:
        return self.state.phase

    # Idea list

    def begin_regenerate(self) -> int:
        """Reset selection and document and start a new idea list request.

        Also supersedes any in-flight document request.

        Returns:
            Request number to pass to complete_regenerate.
        """
        ideas = self.state.ideas
        document = self.state.document

        ideas.request_seq += 1
        ideas.is_loading = True
        ideas.error_message = None

        document.request_seq += 1
        document.selected_phrase = None
        document.content = ""
        document.is_loading = False
        document.error_message = None
        document.copied_at = None

        return ideas.request_seq

    def complete_regenerate(
        self,
        request_seq: int,
        phrases: list[str] | None = None,
        error: str | None = None,
    ) -> bool:
        """Apply an idea list response.

        Args:
            request_seq: Number returned by begin_regenerate.
            phrases: Idea phrases on success.
            error: Error message on failure.

        Returns:
            True if applied, False if the response was stale.
        """
        ideas = self.state.ideas
        if request_seq != ideas.request_seq:
            logger.debug(f"Dropping stale idea list response {request_seq}")
            return False

        ideas.phrases = list(phrases or [])
        ideas.error_message = error
        ideas.is_loading = False
        ideas.has_loaded = True
        return True

    def regenerate(self) -> None:
        """Fetch a fresh idea list (also used on first load)."""
        request_seq = self.begin_regenerate()
        try:
            phrases = self.api_client.fetch_ideas()
        except Exception as e:
            logger.warning(f"Idea list request failed: {e}")
            self.complete_regenerate(request_seq, error=extract_error_message(e))
            return
        self.complete_regenerate(request_seq, phrases=phrases)

    # Document

    def begin_select(self, phrase: str) -> int | None:
        """Select a phrase and start a document request.

        Any previously generated document is cleared immediately.

        Args:
            phrase: Idea phrase to generate a PRD for.

        Returns:
            Request number to pass to complete_select, or None if the idea
            list has not resolved yet.
        """
        if not self.state.ideas.has_loaded:
            logger.warning("Ignoring selection before the idea list has loaded")
            return None

        document = self.state.document
        document.request_seq += 1
        document.selected_phrase = phrase
        document.content = ""
        document.is_loading = True
        document.error_message = None
        document.copied_at = None
        return document.request_seq

    def complete_select(
        self,
        request_seq: int,
        content: str | None = None,
        error: str | None = None,
    ) -> bool:
        """Apply a document response.

        Args:
            request_seq: Number returned by begin_select.
            content: Generated document on success.
            error: Error message on failure.

        Returns:
            True if applied, False if the response was stale.
        """
        document = self.state.document
        if request_seq != document.request_seq:
            logger.debug(f"Dropping stale document response {request_seq}")
            return False

        document.content = content or ""
        document.error_message = error
        document.is_loading = False
        return True

    def select_phrase(self, phrase: str) -> None:
        """Select a phrase and generate its PRD."""
        request_seq = self.begin_select(phrase)
        if request_seq is None:
            return
        try:
            content = self.api_client.generate_prd(phrase)
        except Exception as e:
            logger.warning(f"PRD request failed: {e}")
            self.complete_select(request_seq, error=extract_error_message(e))
            return
        self.complete_select(request_seq, content=content)

    # Errors

    def dismiss_ideas_error(self) -> None:
        self.state.ideas.error_message = None

    def dismiss_document_error(self) -> None:
        self.state.document.error_message = None

    # Copy / download

    def copy(self, sink: Callable[[str], None]) -> bool:
        """Hand the current document to a clipboard sink.

        Args:
            sink: Callable that places text on the clipboard.

        Returns:
            True if there was a document to copy.
        """
        document = self.state.document
        if not document.content:
            return False
        sink(document.content)
        document.copied_at = self._clock()
        return True

    @property
    def is_copied(self) -> bool:
        """Whether the "copied" acknowledgment is still showing."""
        copied_at = self.state.document.copied_at
        if copied_at is None:
            return False
        if self._clock() - copied_at >= self.copy_ack_seconds:
            self.state.document.copied_at = None
            return False
        return True

    def download(self, ext: str) -> tuple[str, bytes] | None:
        """Get the file name and content for downloading the document.

        Args:
            ext: "md" or "prd". The content is the same for both.

        Returns:
            (file name, UTF-8 content), or None when there is no document.

        Raises:
            ValueError: If the extension is not supported.
        """
        if ext not in DOWNLOAD_EXTENSIONS:
            raise ValueError(f"Unsupported extension: {ext}")
        document = self.state.document
        if not document.content:
            return None
        file_name = build_download_filename(document.selected_phrase, ext)
        return file_name, document.content.encode("utf-8")
