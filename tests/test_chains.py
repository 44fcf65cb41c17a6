"""Tests for the chains module."""

import pytest

from prd_generator.chains.idea_generator import (
    SYSTEM_PROMPT as IDEA_SYSTEM_PROMPT,
    USER_PROMPT as IDEA_USER_PROMPT,
    IdeaGeneratorChain,
    parse_ideas,
)
from prd_generator.chains.prd_writer import SYSTEM_PROMPT as PRD_SYSTEM_PROMPT, PRDWriterChain


class TestParseIdeas:
    """Test parsing a model-emitted list into idea phrases."""

    def test_mixed_markers(self):
        """Numbered and bulleted lines are stripped, empty lines dropped."""
        text = "1. Todo app\n- Weather widget\n\n* Recipe finder"

        assert parse_ideas(text) == ["Todo app", "Weather widget", "Recipe finder"]

    def test_preserves_order_and_duplicates(self):
        """Phrases keep model order and are not deduplicated."""
        text = "3. Zebra tracker\n1. Apple picker\n2. Zebra tracker"

        assert parse_ideas(text) == ["Zebra tracker", "Apple picker", "Zebra tracker"]

    def test_count_is_not_capped(self):
        """More than 20 lines are all kept."""
        text = "\n".join(f"{i}. Idea {i}" for i in range(1, 26))

        ideas = parse_ideas(text)

        assert len(ideas) == 25
        assert ideas[0] == "Idea 1"
        assert ideas[-1] == "Idea 25"

    def test_fewer_than_requested(self):
        """Fewer lines than requested are returned as-is."""
        assert parse_ideas("- Only one idea") == ["Only one idea"]

    def test_lines_without_markers(self):
        """Unprefixed lines are trimmed and kept."""
        assert parse_ideas("  Habit tracker  \nBudget planner") == [
            "Habit tracker",
            "Budget planner",
        ]

    def test_carriage_returns(self):
        """CRLF and bare CR line endings split lines too."""
        assert parse_ideas("1. Alpha\r\n2. Beta\r3. Gamma") == ["Alpha", "Beta", "Gamma"]

    def test_other_line_separators_do_not_split(self):
        """Form feeds and Unicode line separators stay inside one phrase."""
        text = "1. Form\x0cfeed builder\n2. Pipe line viewer\n3. Log\x85parser"

        assert parse_ideas(text) == [
            "Form\x0cfeed builder",
            "Pipe line viewer",
            "Log\x85parser",
        ]

    def test_whitespace_only_lines_are_dropped(self):
        """Lines that are empty after trimming are excluded."""
        assert parse_ideas("\n   \n- \n1. Real idea\n") == ["Real idea"]

    def test_only_one_marker_is_stripped(self):
        """Only the leading marker is removed, inner text is kept."""
        assert parse_ideas("1. 3D printer queue - for makers") == [
            "3D printer queue - for makers"
        ]

    def test_empty_text(self):
        """Empty completion yields no ideas."""
        assert parse_ideas("") == []


class TestIdeaGeneratorChain:
    """Test IdeaGeneratorChain with a fake chat model."""

    def test_prompt_messages(self, fake_llm):
        """The prompt is a fixed system + user pair."""
        chain = IdeaGeneratorChain(llm=fake_llm("- idea"))

        messages = chain.prompt.format_messages()

        assert [m.type for m in messages] == ["system", "human"]
        assert messages[0].content == IDEA_SYSTEM_PROMPT
        assert messages[1].content == IDEA_USER_PROMPT
        assert "20" in messages[1].content

    def test_generate_parses_response(self, fake_llm):
        """generate returns parsed phrases."""
        chain = IdeaGeneratorChain(llm=fake_llm("1. Todo app\n2. Pet sitter finder"))

        assert chain.generate() == ["Todo app", "Pet sitter finder"]

    @pytest.mark.asyncio
    async def test_agenerate_parses_response(self, fake_llm):
        """agenerate returns parsed phrases."""
        chain = IdeaGeneratorChain(llm=fake_llm("* Plant watering reminder"))

        assert await chain.agenerate() == ["Plant watering reminder"]

    def test_generate_empty_response(self, fake_llm):
        """An empty completion yields an empty list."""
        chain = IdeaGeneratorChain(llm=fake_llm(""))

        assert chain.generate() == []


class TestPRDWriterChain:
    """Test PRDWriterChain with a fake chat model."""

    def test_prompt_messages(self, fake_llm):
        """The user prompt is passed through as the human message."""
        chain = PRDWriterChain(llm=fake_llm("# PRD"))

        messages = chain.prompt.format_messages(prompt="Write a PRD for {braces} idea")

        assert messages[0].content == PRD_SYSTEM_PROMPT
        assert messages[1].content == "Write a PRD for {braces} idea"

    def test_write_returns_content_verbatim(self, fake_llm):
        """The document is returned without post-processing."""
        content = "# Title\n\n## Overview\n\n  indented line\n"
        chain = PRDWriterChain(llm=fake_llm(content))

        assert chain.write("Write a PRD") == content

    @pytest.mark.asyncio
    async def test_awrite_returns_content_verbatim(self, fake_llm):
        """Async write returns the document unmodified."""
        chain = PRDWriterChain(llm=fake_llm("# Title\n..."))

        assert await chain.awrite("Write a PRD") == "# Title\n..."
