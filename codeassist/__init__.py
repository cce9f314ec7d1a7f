"""
Code Assistant
Prompt-templated code and text tasks backed by Groq's chat-completions API
"""

__version__ = "1.0.0"

from .assistant import (
    CodeAssistant,
    get_assistant,
    init_assistant,
    generate_code,
    generate_review,
    generate_complexity,
    compare_code,
    generate_test_cases,
    beautify_code,
    debug_code,
    analyze_performance,
    summarize_content,
    analyze_security,
)
from .llm import GroqClient, LLMError
from .models import ChatMessage, Settings, TaskKind, TaskRequest
from .prompts import SYSTEM_INSTRUCTIONS, build_chat_message
from .sanitizer import clean_response
from .utils import ConfigurationError, initialize_app, load_and_validate_env

__all__ = [
    # Tasks
    "CodeAssistant",
    "get_assistant",
    "init_assistant",
    "generate_code",
    "generate_review",
    "generate_complexity",
    "compare_code",
    "generate_test_cases",
    "beautify_code",
    "debug_code",
    "analyze_performance",
    "summarize_content",
    "analyze_security",

    # Transport
    "GroqClient",
    "LLMError",

    # Prompting and cleanup
    "SYSTEM_INSTRUCTIONS",
    "build_chat_message",
    "clean_response",

    # Models
    "ChatMessage",
    "Settings",
    "TaskKind",
    "TaskRequest",

    # Configuration
    "ConfigurationError",
    "initialize_app",
    "load_and_validate_env",
]
