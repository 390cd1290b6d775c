"""Tests for prompt assembly and answer generation."""

from unittest.mock import AsyncMock

import pytest

from webrag.core.exceptions import GenerationError
from webrag.core.generation import (
    CONTEXT_SEPARATOR,
    GenerationAdapter,
    build_prompt,
    format_context,
)
from webrag.models import ContextEntry, QueryContext

CONTEXT = QueryContext(
    entries=[
        ContextEntry(source="https://example.com/paris", content="Paris is the capital of France."),
        ContextEntry(source="https://example.com/lyon", content="Lyon is in France."),
    ]
)


class TestFormatContext:
    """Test context serialization."""

    def test_blocks_in_ranking_order(self) -> None:
        """Should render Source/Content blocks joined by the separator."""
        expected = (
            "Source: https://example.com/paris\nContent: Paris is the capital of France."
            + CONTEXT_SEPARATOR
            + "Source: https://example.com/lyon\nContent: Lyon is in France."
        )

        assert format_context(CONTEXT) == expected

    def test_empty_context(self) -> None:
        """Should render nothing for an empty context."""
        assert format_context(QueryContext()) == ""


class TestBuildPrompt:
    """Test prompt construction."""

    def test_contains_context_then_question(self) -> None:
        """Should embed the context block before the question."""
        prompt = build_prompt("What is the capital of France?", CONTEXT)

        assert format_context(CONTEXT) in prompt
        assert "What is the capital of France?" in prompt
        assert prompt.index("Paris is the capital") < prompt.index("What is the capital")

    def test_instructs_to_use_only_context(self) -> None:
        """Should restrict the model to the provided context."""
        assert "ONLY the context" in build_prompt("q", CONTEXT)

    def test_empty_context_still_builds_prompt(self) -> None:
        """Should produce a prompt with an empty context block."""
        prompt = build_prompt("What is the capital of France?", QueryContext())

        assert "Context:\n\n\nQuestion: What is the capital of France?" in prompt


class TestGenerationAdapter:
    """Test the single-shot completion call."""

    @pytest.mark.asyncio
    async def test_returns_completion_verbatim(self, mock_completion) -> None:
        """
        Should send one prompt and return the completion text unchanged.

        Arrange: Completion service answers "Paris"
        Act: Answer a question
        Assert: One call with the built prompt, verbatim answer
        """
        adapter = GenerationAdapter(mock_completion)

        answer = await adapter.answer("What is the capital of France?", CONTEXT)

        assert answer == "Paris"
        mock_completion.complete.assert_awaited_once_with(
            build_prompt("What is the capital of France?", CONTEXT)
        )

    @pytest.mark.asyncio
    async def test_empty_context_still_calls_completion(self, mock_completion) -> None:
        """Should call completion even when nothing was retrieved."""
        adapter = GenerationAdapter(mock_completion)

        await adapter.answer("What is the capital of France?", QueryContext())

        mock_completion.complete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_generation_error_propagates(self) -> None:
        """Should surface completion failures as GenerationError."""
        completion = AsyncMock()
        completion.complete = AsyncMock(side_effect=GenerationError("model unavailable"))

        with pytest.raises(GenerationError):
            await GenerationAdapter(completion).answer("q", CONTEXT)
