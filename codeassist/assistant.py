"""
Task entry points for the code assistant.

Each coroutine renders the task's prompt, sends it to the model through
GroqClient and returns the answer. Tasks whose TaskKind.clean is set pass
the answer through clean_response(); the others return the trimmed
completion untouched.

Module-level functions use a shared CodeAssistant. Call init_assistant() once
at startup so a missing GROQ_API_KEY fails there rather than on the first
task call; otherwise the shared instance is built lazily on first use.
"""

from typing import Optional

from loguru import logger

from .llm import GroqClient
from .models import Settings, TaskKind, TaskRequest
from .prompts import build_chat_message
from .sanitizer import clean_response
from .utils import get_config


class CodeAssistant:
    """Dispatches task requests to the model and post-processes the answers."""

    def __init__(self, client: GroqClient):
        self.client = client

    async def close(self) -> None:
        await self.client.close()

    async def run(self, request: TaskRequest) -> str:
        """
        Execute a single task request.

        Raises:
            LLMError: If the model call fails
        """
        chat = build_chat_message(request)
        text = await self.client.complete(chat)

        if request.task.clean:
            cleaned = clean_response(text)
            if len(cleaned) != len(text):
                logger.debug(
                    "Stripped echoed instructions from response",
                    task=request.task.value,
                    removed_chars=len(text) - len(cleaned)
                )
            return cleaned
        return text

    async def generate_code(self, prompt: str, language: Optional[str] = None) -> str:
        return await self.run(TaskRequest(task=TaskKind.GENERATE_CODE, primary_text=prompt, language=language))

    async def generate_review(self, code: str) -> str:
        return await self.run(TaskRequest(task=TaskKind.GENERATE_REVIEW, primary_text=code))

    async def generate_complexity(self, code: str) -> str:
        return await self.run(TaskRequest(task=TaskKind.GENERATE_COMPLEXITY, primary_text=code))

    async def compare_code(self, code_a: str, code_b: str, language: Optional[str] = None) -> str:
        return await self.run(TaskRequest(
            task=TaskKind.COMPARE_CODE,
            primary_text=code_a,
            secondary_text=code_b,
            language=language
        ))

    async def generate_test_cases(self, code: str, language: Optional[str] = None) -> str:
        return await self.run(TaskRequest(task=TaskKind.GENERATE_TEST_CASES, primary_text=code, language=language))

    async def beautify_code(self, code: str, language: Optional[str] = None) -> str:
        return await self.run(TaskRequest(task=TaskKind.BEAUTIFY_CODE, primary_text=code, language=language))

    async def debug_code(self, code: str, language: Optional[str] = None) -> str:
        return await self.run(TaskRequest(task=TaskKind.DEBUG_CODE, primary_text=code, language=language))

    async def analyze_performance(self, code: str, language: Optional[str] = None) -> str:
        return await self.run(TaskRequest(task=TaskKind.ANALYZE_PERFORMANCE, primary_text=code, language=language))

    async def summarize_content(
        self,
        content: str,
        summary_length: str = "medium",
        summary_type: str = "general",
    ) -> str:
        return await self.run(TaskRequest(
            task=TaskKind.SUMMARIZE_CONTENT,
            primary_text=content,
            summary_length=summary_length,
            summary_type=summary_type
        ))

    async def analyze_security(self, code: str, language: Optional[str] = None) -> str:
        return await self.run(TaskRequest(task=TaskKind.ANALYZE_SECURITY, primary_text=code, language=language))


# Global assistant instance
_assistant: Optional[CodeAssistant] = None


def init_assistant(settings: Optional[Settings] = None) -> CodeAssistant:
    """
    Build the shared assistant. Call once at startup.

    Args:
        settings: Explicit configuration; loaded from the environment when omitted

    Raises:
        ConfigurationError: If settings are omitted and GROQ_API_KEY is not set
    """
    global _assistant
    _assistant = CodeAssistant(GroqClient(settings or get_config()))
    return _assistant


def get_assistant() -> CodeAssistant:
    """
    Get the global assistant, initializing it from the environment if needed.

    Raises:
        ConfigurationError: If GROQ_API_KEY is not set
    """
    global _assistant
    if _assistant is None:
        _assistant = CodeAssistant(GroqClient(get_config()))
    return _assistant


async def generate_code(prompt: str, language: Optional[str] = None) -> str:
    return await get_assistant().generate_code(prompt, language)


async def generate_review(code: str) -> str:
    return await get_assistant().generate_review(code)


async def generate_complexity(code: str) -> str:
    return await get_assistant().generate_complexity(code)


async def compare_code(code_a: str, code_b: str, language: Optional[str] = None) -> str:
    return await get_assistant().compare_code(code_a, code_b, language)


async def generate_test_cases(code: str, language: Optional[str] = None) -> str:
    return await get_assistant().generate_test_cases(code, language)


async def beautify_code(code: str, language: Optional[str] = None) -> str:
    return await get_assistant().beautify_code(code, language)


async def debug_code(code: str, language: Optional[str] = None) -> str:
    return await get_assistant().debug_code(code, language)


async def analyze_performance(code: str, language: Optional[str] = None) -> str:
    return await get_assistant().analyze_performance(code, language)


async def summarize_content(content: str, summary_length: str = "medium", summary_type: str = "general") -> str:
    return await get_assistant().summarize_content(content, summary_length, summary_type)


async def analyze_security(code: str, language: Optional[str] = None) -> str:
    return await get_assistant().analyze_security(code, language)
