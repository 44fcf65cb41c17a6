"""Idea generation chain.

Asks the model for a batch of short app or tool ideas and parses the returned
list into individual idea phrases.
"""

import logging
import re

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from prd_generator.config import get_settings
from prd_generator.llm import get_llm

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are a helpful assistant that generates creative app or tool ideas "
    "for product requirements documents."
)

USER_PROMPT = (
    "Generate 20 creative, short app or tool ideas suitable for a product "
    "requirements document. Return them as a plain numbered or bulleted list, "
    "one idea per line."
)

# "12." or a leading "-" / "*" bullet with any following whitespace
LIST_MARKER_PATTERN = re.compile(r"^\d+\.|^[-*]\s*")

# Only \n and \r end a line; other Unicode line separators stay inside the phrase
LINE_BREAK_PATTERN = re.compile(r"\n|\r")


def parse_ideas(text: str) -> list[str]:
    """Split a model-emitted list into idea phrases.

    Order is preserved. Phrases are neither deduplicated nor capped, so the
    count is whatever the model produced.

    Args:
        text: Raw completion text, one idea per line.

    Returns:
        Trimmed idea phrases with list markers and empty lines removed.
    """
    ideas = []
    for line in LINE_BREAK_PATTERN.split(text):
        phrase = LIST_MARKER_PATTERN.sub("", line.lstrip(), count=1).strip()
        if phrase:
            ideas.append(phrase)
    return ideas


class IdeaGeneratorChain:
    """Chain for generating a list of PRD seed ideas."""

    def __init__(self, llm: BaseChatModel | None = None):
        """Initialize the idea generator chain.

        Args:
            llm: Optional chat model. Creates a ChatVertexAI with the idea
                output budget if not provided.
        """
        self.llm = llm or get_llm(max_output_tokens=get_settings().idea_max_tokens)
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", SYSTEM_PROMPT),
                ("human", USER_PROMPT),
            ]
        )
        self.chain = self.prompt | self.llm | StrOutputParser()

    def generate(self) -> list[str]:
        """Generate idea phrases.

        Returns:
            Parsed idea phrases in model order.
        """
        result = self.chain.invoke({}) or ""
        ideas = parse_ideas(result)
        logger.info(f"Generated {len(ideas)} ideas")
        return ideas

    async def agenerate(self) -> list[str]:
        """Async version of generate.

        Returns:
            Parsed idea phrases in model order.
        """
        result = await self.chain.ainvoke({}) or ""
        ideas = parse_ideas(result)
        logger.info(f"Generated {len(ideas)} ideas")
        return ideas
