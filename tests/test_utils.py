import pytest

from codeassist import utils
from codeassist.utils import (
    ConfigurationError,
    Timer,
    get_config,
    load_and_validate_env,
    sanitize_for_logging,
)


CONFIG_VARS = ["GROQ_API_KEY", "GROQ_MODEL", "GROQ_BASE_URL", "GROQ_TEMPERATURE", "REQUEST_TIMEOUT_SECONDS"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(utils, "load_dotenv", lambda: False)
    for var in CONFIG_VARS:
        monkeypatch.delenv(var, raising=False)


def test_missing_api_key_is_fatal():
    with pytest.raises(ConfigurationError, match="GROQ_API_KEY"):
        load_and_validate_env()


def test_empty_api_key_is_fatal(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "")
    with pytest.raises(ConfigurationError):
        load_and_validate_env()


def test_defaults(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    settings = load_and_validate_env()

    assert settings.groq_api_key == "gsk_test"
    assert settings.model == "llama-3.3-70b-versatile"
    assert settings.base_url == "https://api.groq.com/openai/v1"
    assert settings.temperature == 0.7
    assert settings.request_timeout_seconds == 60.0


def test_overrides(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.setenv("GROQ_MODEL", "llama-3.1-8b-instant")
    monkeypatch.setenv("GROQ_TEMPERATURE", "0.2")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "15")

    settings = load_and_validate_env()
    assert settings.model == "llama-3.1-8b-instant"
    assert settings.temperature == 0.2
    assert settings.request_timeout_seconds == 15.0


def test_invalid_number_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.setenv("GROQ_TEMPERATURE", "warm")

    assert load_and_validate_env().temperature == 0.7


def test_get_config_is_cached(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_first")
    first = get_config()
    monkeypatch.setenv("GROQ_API_KEY", "gsk_second")
    assert get_config() is first

    utils.reset_config()
    assert get_config().groq_api_key == "gsk_second"


def test_sanitize_for_logging_redacts_and_truncates():
    assert sanitize_for_logging(None) == ""
    assert "gsk_secret123" not in sanitize_for_logging("key=gsk_secret123")
    assert "[REDACTED]" in sanitize_for_logging("Authorization: Bearer abc.def")

    long_text = "x" * 300
    assert sanitize_for_logging(long_text, max_length=50) == "x" * 50 + "..."


def test_timer_measures_duration():
    with Timer("unit") as timer:
        sum(range(1000))
    assert timer.duration_ms >= 0.0
    assert timer.end_time >= timer.start_time


def test_timer_reraises():
    with pytest.raises(ValueError):
        with Timer("failing"):
            raise ValueError("bad")


def test_out_of_range_value_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.setenv("GROQ_TEMPERATURE", "5")

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_and_validate_env()
