"""PRD writing chain.

Sends a free-text prompt to the model and returns the generated product
requirements document exactly as emitted.
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from prd_generator.config import get_settings
from prd_generator.llm import get_llm

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = "You are a helpful assistant that writes product requirements documents."


class PRDWriterChain:
    """Chain for writing a product requirements document from a prompt."""

    def __init__(self, llm: BaseChatModel | None = None):
        """Initialize the PRD writer chain.

        Args:
            llm: Optional chat model. Creates a ChatVertexAI with the document
                output budget if not provided.
        """
        self.llm = llm or get_llm(max_output_tokens=get_settings().prd_max_tokens)
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", SYSTEM_PROMPT),
                ("human", "{prompt}"),
            ]
        )
        self.chain = self.prompt | self.llm | StrOutputParser()

    def write(self, prompt: str) -> str:
        """Write a PRD for the given prompt.

        Args:
            prompt: Full document-generation prompt.

        Returns:
            Generated Markdown text, unmodified. Empty string if the model
            returned no content.
        """
        result = self.chain.invoke({"prompt": prompt})
        return result or ""

    async def awrite(self, prompt: str) -> str:
        """Async version of write.

        Args:
            prompt: Full document-generation prompt.

        Returns:
            Generated Markdown text, unmodified.
        """
        result = await self.chain.ainvoke({"prompt": prompt})
        logger.info(f"Generated PRD ({len(result or '')} chars)")
        return result or ""
