"""
Generation adapter.

Serializes retrieved context into a single prompt and asks the completion
service for an answer grounded in that context only.

Dependencies: langchain_core.prompts, webrag.boundary.protocols
System role: Prompt assembly and answer generation
"""

import logging

from langchain_core.prompts import PromptTemplate

from webrag.boundary.protocols import CompletionService
from webrag.models import QueryContext

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n---\n\n"

RAG_PROMPT_TEMPLATE = """You are a helpful assistant that answers questions using the provided context.
Answer using ONLY the context below. If the context does not contain the answer, say that you don't know.

Context:
{context}

Question: {question}

Answer:"""

RAG_PROMPT = PromptTemplate.from_template(RAG_PROMPT_TEMPLATE)


def format_context(context: QueryContext) -> str:
    """Render entries as "Source: ...\\nContent: ..." blocks in ranking order."""
    return CONTEXT_SEPARATOR.join(
        f"Source: {entry.source}\nContent: {entry.content}" for entry in context.entries
    )


def build_prompt(question: str, context: QueryContext) -> str:
    """
    Build the completion prompt.

    An empty context still yields a prompt, with an empty context block.

    Args:
        question: User's question
        context: Retrieved context

    Returns:
        str: Rendered prompt
    """
    return RAG_PROMPT.format(context=format_context(context), question=question)


class GenerationAdapter:
    """One question, one completion request, one answer."""

    def __init__(self, completion: CompletionService) -> None:
        self._completion = completion

    async def answer(self, question: str, context: QueryContext) -> str:
        """
        Answer a question from the retrieved context.

        Args:
            question: User's question
            context: Retrieved context (may be empty)

        Returns:
            str: Completion text, verbatim

        Raises:
            GenerationError: When the completion service fails
        """
        prompt = build_prompt(question, context)
        logger.info(
            "%s:answer - Generating answer",
            __name__,
            extra={"context_entries": len(context.entries), "prompt_length": len(prompt)},
        )
        return await self._completion.complete(prompt)
