"""LangChain chains for idea and PRD generation."""

from prd_generator.chains.idea_generator import IdeaGeneratorChain, parse_ideas
from prd_generator.chains.prd_writer import PRDWriterChain

__all__ = [
    "IdeaGeneratorChain",
    "PRDWriterChain",
    "parse_ideas",
]
