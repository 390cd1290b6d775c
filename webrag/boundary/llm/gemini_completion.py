"""
Gemini completion adapter.

Single-shot prompt -> text using ChatGoogleGenerativeAI. No streaming and
no conversation state.

Dependencies: langchain_google_genai
System role: Generative Completion Service collaborator
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from webrag.core.exceptions import GenerationError

logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "gemini-2.5-flash"


def message_text(content: str | list) -> str:
    """Flatten chat message content (string or list of parts) into text."""
    if isinstance(content, str):
        return content
    parts = []
    for item in content:
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, dict):
            parts.append(item.get("text", ""))
        else:
            parts.append(str(item))
    return "".join(parts)


class GeminiCompletionService:
    """Answer prompts with a Gemini chat model."""

    def __init__(
        self,
        model: str = DEFAULT_CHAT_MODEL,
        temperature: float = 0.0,
        google_api_key: str | None = None,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize completion service.

        Args:
            model: Gemini model identifier
            temperature: Model temperature (0.0 for deterministic)
            google_api_key: API key (falls back to GOOGLE_API_KEY env when None)
            chat_model: Pre-built LangChain chat model (overrides model/key)
        """
        if chat_model is None:
            kwargs = {"model": model, "temperature": temperature}
            if google_api_key:
                kwargs["google_api_key"] = google_api_key
            chat_model = ChatGoogleGenerativeAI(**kwargs)

        self._model = chat_model
        self._model_id = model

    async def complete(self, prompt: str) -> str:
        """
        Generate a completion for the prompt.

        Args:
            prompt: Fully rendered prompt

        Returns:
            str: Generated text, verbatim

        Raises:
            GenerationError: When the model call fails
        """
        logger.info(
            "%s:complete - Requesting completion",
            __name__,
            extra={"model": self._model_id, "prompt_length": len(prompt)},
        )
        try:
            response = await self._model.ainvoke(prompt)
        except Exception as e:
            raise GenerationError(
                f"Completion request failed: {e}",
                details={"model": self._model_id},
            ) from e
        return message_text(response.content)
