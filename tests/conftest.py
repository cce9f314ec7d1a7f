"""Shared fixtures for the code assistant tests."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from codeassist import assistant, utils
from codeassist.llm import GroqClient
from codeassist.models import Settings


def make_completion(content, total_tokens=42):
    """Build an object shaped like the SDK's ChatCompletion."""
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(
        choices=[SimpleNamespace(index=0, message=message, finish_reason="stop")],
        usage=SimpleNamespace(total_tokens=total_tokens),
    )


@pytest.fixture(autouse=True)
def reset_globals():
    utils.reset_config()
    assistant._assistant = None
    yield
    utils.reset_config()
    assistant._assistant = None


@pytest.fixture
def settings():
    return Settings(groq_api_key="gsk_test_key")


@pytest.fixture
def openai_client():
    """Stand-in for AsyncOpenAI; set .chat.completions.create per test."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion("Generated answer"))
    return client


@pytest.fixture
def groq_client(settings, openai_client):
    return GroqClient(settings, client=openai_client)
