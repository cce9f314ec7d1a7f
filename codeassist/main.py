"""FastAPI application entry point for the code assistant.

This module provides:
- One POST endpoint per assistant task under /api
- Health and service information endpoints
- Error handlers mapping LLM and configuration failures to JSON errors
- Request logging with timing
"""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from . import __version__
from .assistant import CodeAssistant, get_assistant, init_assistant
from .llm import LLMError
from .models import (
    CodeRequest, CompareRequest, ErrorResponse, GenerateRequest,
    HealthResponse, SummaryRequest, TaskKind, TaskResponse
)
from .utils import ConfigurationError, get_config, get_current_timestamp, initialize_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load configuration and build the assistant before serving requests."""
    initialize_app()
    assistant = init_assistant()
    logger.info("Code assistant started", version=__version__, endpoints_count=len(app.routes))
    yield
    await assistant.close()
    logger.info("Code assistant stopped")


app = FastAPI(
    title="Code Assistant",
    description="Prompt-templated code and text tasks backed by Groq",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_and_timing_middleware(request: Request, call_next):
    """Log requests and responses with timing information."""
    start_time = time.time()
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id

    logger.info("Incoming request", method=request.method, url=str(request.url), request_id=request_id)

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        processing_time_ms=(time.time() - start_time) * 1000,
        request_id=request_id
    )
    return response


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Handle configuration errors."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="CONFIGURATION_ERROR",
            message="System configuration error",
            details={"error": str(exc)},
            request_id=getattr(request.state, "request_id", None)
        ).model_dump(mode="json")
    )


@app.exception_handler(LLMError)
async def llm_error_handler(request: Request, exc: LLMError):
    """Handle failed model calls."""
    details = {"error": str(exc)}
    if exc.task is not None:
        details["task"] = exc.task.value
    return JSONResponse(
        status_code=502,
        content=ErrorResponse(
            error="LLM_ERROR",
            message="The language model request failed",
            details=details,
            request_id=getattr(request.state, "request_id", None)
        ).model_dump(mode="json")
    )


@app.get("/")
async def root():
    """Root endpoint with basic service information."""
    return {
        "service": "Code Assistant",
        "version": __version__,
        "status": "running",
        "timestamp": get_current_timestamp(),
        "endpoints": {
            "generate_code": "/api/generate-code",
            "review": "/api/review",
            "complexity": "/api/complexity",
            "compare": "/api/compare",
            "test_cases": "/api/test-cases",
            "beautify": "/api/beautify",
            "debug": "/api/debug",
            "performance": "/api/performance",
            "summarize": "/api/summarize",
            "security": "/api/security",
            "health": "/health",
            "docs": "/docs"
        }
    }


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report service status and the configured model."""
    return HealthResponse(status="healthy", version=__version__, model=get_config().model)


# API Endpoints

@app.post("/api/generate-code", response_model=TaskResponse)
async def generate_code_endpoint(
    request: GenerateRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.generate_code(request.prompt, request.language)
    return TaskResponse(task=TaskKind.GENERATE_CODE, result=result)


@app.post("/api/review", response_model=TaskResponse)
async def review_endpoint(
    request: CodeRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.generate_review(request.code)
    return TaskResponse(task=TaskKind.GENERATE_REVIEW, result=result)


@app.post("/api/complexity", response_model=TaskResponse)
async def complexity_endpoint(
    request: CodeRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.generate_complexity(request.code)
    return TaskResponse(task=TaskKind.GENERATE_COMPLEXITY, result=result)


@app.post("/api/compare", response_model=TaskResponse)
async def compare_endpoint(
    request: CompareRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.compare_code(request.code_a, request.code_b, request.language)
    return TaskResponse(task=TaskKind.COMPARE_CODE, result=result)


@app.post("/api/test-cases", response_model=TaskResponse)
async def test_cases_endpoint(
    request: CodeRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.generate_test_cases(request.code, request.language)
    return TaskResponse(task=TaskKind.GENERATE_TEST_CASES, result=result)


@app.post("/api/beautify", response_model=TaskResponse)
async def beautify_endpoint(
    request: CodeRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.beautify_code(request.code, request.language)
    return TaskResponse(task=TaskKind.BEAUTIFY_CODE, result=result)


@app.post("/api/debug", response_model=TaskResponse)
async def debug_endpoint(
    request: CodeRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.debug_code(request.code, request.language)
    return TaskResponse(task=TaskKind.DEBUG_CODE, result=result)


@app.post("/api/performance", response_model=TaskResponse)
async def performance_endpoint(
    request: CodeRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.analyze_performance(request.code, request.language)
    return TaskResponse(task=TaskKind.ANALYZE_PERFORMANCE, result=result)


@app.post("/api/summarize", response_model=TaskResponse)
async def summarize_endpoint(
    request: SummaryRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.summarize_content(request.content, request.length, request.type)
    return TaskResponse(task=TaskKind.SUMMARIZE_CONTENT, result=result)


@app.post("/api/security", response_model=TaskResponse)
async def security_endpoint(
    request: CodeRequest,
    assistant: CodeAssistant = Depends(get_assistant)
) -> TaskResponse:
    result = await assistant.analyze_security(request.code, request.language)
    return TaskResponse(task=TaskKind.ANALYZE_SECURITY, result=result)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("codeassist.main:app", host="0.0.0.0", port=8000)
