"""
Pydantic data models for the code assistant.

This module defines the task vocabulary, the per-call request and message
structures, the runtime settings, and the HTTP request/response models.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


def utc_now():
    """Factory function to get current UTC datetime."""
    return datetime.now(timezone.utc)


class TaskKind(str, Enum):
    """Task types the assistant can dispatch to the model."""
    GENERATE_CODE = "generate_code"
    GENERATE_REVIEW = "generate_review"
    GENERATE_COMPLEXITY = "generate_complexity"
    COMPARE_CODE = "compare_code"
    GENERATE_TEST_CASES = "generate_test_cases"
    BEAUTIFY_CODE = "beautify_code"
    DEBUG_CODE = "debug_code"
    ANALYZE_PERFORMANCE = "analyze_performance"
    SUMMARIZE_CONTENT = "summarize_content"
    ANALYZE_SECURITY = "analyze_security"

    @property
    def clean(self) -> bool:
        """Whether completions for this task go through the sanitizer."""
        return self not in RAW_OUTPUT_TASKS


# Structured outputs that header stripping would damage
RAW_OUTPUT_TASKS = frozenset({
    TaskKind.BEAUTIFY_CODE,
    TaskKind.DEBUG_CODE,
    TaskKind.ANALYZE_PERFORMANCE,
    TaskKind.SUMMARIZE_CONTENT,
    TaskKind.ANALYZE_SECURITY,
})


class MessageRole(str, Enum):
    """Chat message roles understood by the completions endpoint."""
    SYSTEM = "system"
    USER = "user"


class Settings(BaseModel):
    """Runtime configuration, built once at startup."""
    model_config = ConfigDict(frozen=True)

    groq_api_key: str = Field(..., min_length=1, repr=False, description="Bearer credential for the Groq API")
    base_url: str = Field(default="https://api.groq.com/openai/v1", description="OpenAI-compatible API root")
    model: str = Field(default="llama-3.3-70b-versatile", description="Chat model identifier")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    request_timeout_seconds: float = Field(default=60.0, gt=0, description="Per-request timeout passed to the SDK")


class TaskRequest(BaseModel):
    """Caller-supplied inputs for a single task."""
    task: TaskKind = Field(..., description="Task to perform")
    primary_text: str = Field(..., description="Prompt, code, or content to process")
    language: Optional[str] = Field(None, description="Programming language, if known")
    secondary_text: Optional[str] = Field(None, description="Second snippet for comparisons")
    summary_length: str = Field(default="medium", description="Desired summary length")
    summary_type: str = Field(default="general", description="Desired summary style")


class ChatMessage(BaseModel):
    """One system instruction plus one user prompt, built fresh per call."""
    model_config = ConfigDict(frozen=True)

    task: Optional[TaskKind] = None
    system_instruction: str
    user_prompt: str

    def to_messages(self) -> List[Dict[str, str]]:
        """Render as the messages list for the chat-completions API."""
        return [
            {"role": MessageRole.SYSTEM.value, "content": self.system_instruction},
            {"role": MessageRole.USER.value, "content": self.user_prompt},
        ]


# API request/response models
class GenerateRequest(BaseModel):
    """Request body for code generation."""
    prompt: str = Field(..., description="What the code should do")
    language: Optional[str] = Field(None, description="Preferred language")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "prompt": "write a function that reverses a string",
            "language": "Python"
        }
    })


class CodeRequest(BaseModel):
    """Request body for single-snippet tasks."""
    code: str = Field(..., description="Source code to process")
    language: Optional[str] = Field(None, description="Programming language of the snippet")


class CompareRequest(BaseModel):
    """Request body for comparing two snippets."""
    code_a: str = Field(..., description="First snippet")
    code_b: str = Field(..., description="Second snippet")
    language: Optional[str] = Field(None, description="Programming language of both snippets")


class SummaryRequest(BaseModel):
    """Request body for summarization."""
    content: str = Field(..., description="Text to summarize")
    length: str = Field(default="medium", description="short, medium or long")
    type: str = Field(default="general", description="general, academic or business")


class TaskResponse(BaseModel):
    """Result of a dispatched task."""
    task: TaskKind = Field(..., description="Task that produced the result")
    result: str = Field(..., description="Model answer, sanitized when the task calls for it")
    timestamp: datetime = Field(default_factory=utc_now, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: str = Field(..., description="Error type identifier")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, str]] = Field(None, description="Additional error details")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
    timestamp: datetime = Field(default_factory=utc_now, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=utc_now, description="Health check timestamp")
    version: str = Field(..., description="Service version")
    model: Optional[str] = Field(None, description="Configured chat model")
