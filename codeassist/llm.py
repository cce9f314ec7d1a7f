"""
Groq chat-completions client.

This module provides:
- GroqClient, a thin wrapper over the OpenAI SDK pointed at Groq's
  OpenAI-compatible endpoint
- LLMError, raised for any failed exchange with the task and the
  underlying cause attached

There is no retry or fallback: one ChatMessage in, one completion out.
"""

from typing import Optional

from loguru import logger
from openai import AsyncOpenAI

from .models import ChatMessage, Settings, TaskKind
from .utils import Timer, sanitize_for_logging


class LLMError(Exception):
    """Raised when a completion request fails."""

    def __init__(self, message: str, task: Optional[TaskKind] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.task = task
        self.cause = cause


class GroqClient:
    """Groq API client for single-turn chat completions."""

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self.client = client or AsyncOpenAI(
            base_url=settings.base_url,
            api_key=settings.groq_api_key,
            timeout=settings.request_timeout_seconds,
            max_retries=0,
        )
        self.model = settings.model

        logger.info("Groq client initialized", model=self.model, base_url=settings.base_url)

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.client.close()
        logger.info("Groq client closed", model=self.model)

    async def complete(
        self,
        chat: ChatMessage,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Send one system instruction and one user prompt, return the completion.

        Args:
            chat: Instruction and prompt for this exchange
            model: Model to use (defaults to the configured model)
            temperature: Sampling temperature (defaults to the configured value)

        Returns:
            str: First choice's content, trimmed

        Raises:
            LLMError: If the request fails or returns no choices
        """
        model = model or self.model
        task_name = chat.task.value if chat.task else "chat"
        if temperature is None:
            temperature = self.settings.temperature

        logger.info(
            "Generating LLM response",
            task=task_name,
            model=model,
            temperature=temperature,
            prompt_preview=sanitize_for_logging(chat.user_prompt, 100)
        )

        try:
            with Timer(f"llm_{task_name}"):
                response = await self.client.chat.completions.create(
                    model=model,
                    messages=chat.to_messages(),
                    temperature=temperature,
                )
        except Exception as e:
            logger.error(
                "LLM generation failed",
                task=task_name,
                model=model,
                error=str(e),
                error_type=type(e).__name__
            )
            raise LLMError(f"LLM generation failed for {task_name}: {e}", task=chat.task, cause=e) from e

        if not response.choices:
            logger.error("LLM returned no choices", task=task_name, model=model)
            raise LLMError(f"No response choices returned for {task_name}", task=chat.task)

        text = (response.choices[0].message.content or "").strip()

        logger.info(
            "LLM response generated successfully",
            task=task_name,
            model=model,
            response_length=len(text),
            tokens_used=getattr(response.usage, "total_tokens", None)
        )
        return text
