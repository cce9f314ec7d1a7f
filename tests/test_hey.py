import importlib.util
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from codeassist.llm import LLMError

HEY_PATH = Path(__file__).parent.parent / "scripts" / "hey.py"


@pytest.fixture
def hey(monkeypatch, settings):
    module_spec = importlib.util.spec_from_file_location("hey", HEY_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)

    client = MagicMock()
    client.complete = AsyncMock(return_value="pong")
    client.close = AsyncMock()
    monkeypatch.setattr(module, "load_and_validate_env", lambda: settings)
    monkeypatch.setattr(module, "GroqClient", lambda _settings: client)
    module.fake_client = client
    return module


@pytest.mark.asyncio
async def test_run_request_uses_configured_defaults_and_closes(hey):
    assert await hey.run_request("ping") == "pong"

    chat = hey.fake_client.complete.call_args.args[0]
    assert chat.user_prompt == "ping"
    assert chat.system_instruction == "You are a helpful assistant."
    assert hey.fake_client.complete.call_args.kwargs == {"model": None, "temperature": None}
    hey.fake_client.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_request_closes_client_on_failure(hey):
    hey.fake_client.complete.side_effect = LLMError("upstream failed")

    with pytest.raises(LLMError):
        await hey.run_request("ping", model="llama-3.1-8b-instant", temperature=0.2)

    hey.fake_client.close.assert_awaited_once()
