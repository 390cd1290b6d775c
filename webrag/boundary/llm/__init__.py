"""Completion service adapters."""

from webrag.boundary.llm.gemini_completion import GeminiCompletionService

__all__ = ["GeminiCompletionService"]
