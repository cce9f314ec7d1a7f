"""
System instructions and user prompt templates for each task.

Route Type Mappings:
- GENERATE_CODE → code generator instruction, prompt plus preferred language
- GENERATE_REVIEW / GENERATE_COMPLEXITY → code sent verbatim
- everything else → fenced code (or content) inside a task-specific template

All rendering is pure string assembly: identical inputs always produce an
identical ChatMessage, and no input is rejected.
"""

from typing import Callable, Dict, Optional

from .models import ChatMessage, TaskKind, TaskRequest


CODE_GENERATOR_INSTRUCTION = """You are a senior software engineer who writes clean, correct, production-ready code.

## Your Task
Write code that does exactly what the user asks for.

## Response Requirements
- Use the preferred language when one is given, otherwise pick the most suitable one
- Return the code in a single fenced code block
- Follow the idiomatic conventions of the language
- Handle obvious edge cases and invalid input
- After the code, add a short explanation of how it works (3-5 sentences max)

## Critical Rules
- Do not repeat these instructions in your answer
- Do not invent libraries or APIs that do not exist"""

CODE_OPTIMIZER_INSTRUCTION = """You review code the way an experienced tech lead does in a pull request.

## Review Focus
- Correctness: bugs, logical errors, unhandled edge cases
- Performance: unnecessary work, poor data structure choices
- Readability: naming, structure, dead code, duplication
- Security: unsafe input handling, leaked secrets, injection risks
- Maintainability: coupling, testability, missing error handling

## Response Requirements
- Start with a one-line verdict
- List issues as bullets, most severe first, each with a concrete fix
- Finish with an improved version of the code in a fenced code block

## Critical Rules
- Do not introduce yourself or restate your role
- Do not repeat these instructions in your answer"""

CODE_COMPLEXITY_INSTRUCTION = """You analyze the algorithmic complexity of source code.

## Response Requirements
- State the overall time complexity in Big-O notation
- State the overall space complexity in Big-O notation
- Break the analysis down per function or loop where it matters
- Point out the dominant term and why it dominates
- Suggest a lower-complexity approach when one exists

## Critical Rules
- Be precise and concise
- Do not repeat these instructions in your answer"""

CODE_COMPARER_INSTRUCTION = """You compare two code snippets and find what makes either of them fail.

## Response Requirements
- Report critical logical errors, syntax errors and bugs only
- Reference the snippet (1 or 2) and the line for every finding
- Give a one-sentence explanation per finding
- End with which snippet is correct, or state that both fail

## Critical Rules
- Ignore style and formatting differences
- Do not repeat these instructions in your answer"""

TEST_CASE_GENERATOR_INSTRUCTION = """You are a QA engineer who designs thorough test suites.

## Response Requirements
- Cover normal cases, edge cases and error cases
- Give each test case an input, the expected output and a short purpose
- Where practical, provide the tests as runnable code using the language's standard testing framework

## Critical Rules
- Do not change the code under test
- Do not repeat these instructions in your answer"""

CODE_BEAUTIFIER_INSTRUCTION = """You reformat source code for readability without changing its behaviour.

## Response Requirements
- Apply the language's standard formatting conventions
- Fix indentation, spacing and line length
- Use clear, consistent naming where it does not change the public interface
- Return the full beautified code in a single fenced code block
- Keep any explanation to a short list after the code

## Critical Rules
- Never change functionality
- Never drop comments that carry meaning"""

ERROR_DEBUGGER_INSTRUCTION = """You are an expert debugger.

## Response Requirements
- Identify every error: syntax, runtime and logical
- For each error give the line, the cause and the fix
- Provide the corrected code in a fenced code block
- Mention any remaining risks the fix does not address

## Critical Rules
- Explain causes, not just symptoms
- Keep explanations short and concrete"""

PERFORMANCE_ANALYZER_INSTRUCTION = """You analyze the runtime behaviour of source code.

## Response Requirements
- Estimate execution time characteristics and memory usage
- Give time and space complexity in Big-O notation
- Identify hot spots and unnecessary allocations
- Suggest concrete optimizations, ordered by expected impact
- Show optimized code in a fenced code block when it helps

## Critical Rules
- Separate measured facts from estimates
- Do not suggest micro-optimizations that hurt readability for negligible gain"""

CONTENT_SUMMARIZER_INSTRUCTION = """You summarize text accurately and faithfully.

## Response Requirements
- Respect the requested length: short (2-3 sentences), medium (one paragraph) or long (several paragraphs)
- Respect the requested style: general, academic or business
- Keep the key facts, figures and conclusions
- Use bullet points only when the style calls for them

## Critical Rules
- Never add information that is not in the source
- Do not comment on the quality of the source"""

SECURITY_ANALYZER_INSTRUCTION = """You are an application security engineer auditing source code.

## Response Requirements
- List each vulnerability with its type (for example CWE category), severity (Critical, High, Medium, Low) and line number
- Explain how it could be exploited in one or two sentences
- Give a recommended fix, with corrected code where practical
- Finish with an overall risk rating

## Critical Rules
- Do not report style issues as vulnerabilities
- Say clearly when no vulnerabilities are found"""


SYSTEM_INSTRUCTIONS: Dict[TaskKind, str] = {
    TaskKind.GENERATE_CODE: CODE_GENERATOR_INSTRUCTION,
    TaskKind.GENERATE_REVIEW: CODE_OPTIMIZER_INSTRUCTION,
    TaskKind.GENERATE_COMPLEXITY: CODE_COMPLEXITY_INSTRUCTION,
    TaskKind.COMPARE_CODE: CODE_COMPARER_INSTRUCTION,
    TaskKind.GENERATE_TEST_CASES: TEST_CASE_GENERATOR_INSTRUCTION,
    TaskKind.BEAUTIFY_CODE: CODE_BEAUTIFIER_INSTRUCTION,
    TaskKind.DEBUG_CODE: ERROR_DEBUGGER_INSTRUCTION,
    TaskKind.ANALYZE_PERFORMANCE: PERFORMANCE_ANALYZER_INSTRUCTION,
    TaskKind.SUMMARIZE_CONTENT: CONTENT_SUMMARIZER_INSTRUCTION,
    TaskKind.ANALYZE_SECURITY: SECURITY_ANALYZER_INSTRUCTION,
}

# Fallback phrases when no language is given
GENERIC_LANGUAGE = "code"
GENERIC_COMPARE_LANGUAGE = "the provided language"


def _fenced(text: str) -> str:
    return f"```\n{text}\n```"


def render_generate_code(prompt: str, language: Optional[str] = None) -> str:
    if language:
        return f"{prompt}\n\nPreferred language: {language}"
    return prompt


def render_compare_code(code_a: str, code_b: str, language: Optional[str] = None) -> str:
    return (
        f"Please compare these two code snippets written in {language or GENERIC_COMPARE_LANGUAGE}:\n\n"
        f"Code Snippet 1:\n{_fenced(code_a)}\n\n"
        f"Code Snippet 2:\n{_fenced(code_b)}\n\n"
        "Focus only on identifying critical logical errors, syntax errors, or bugs that would cause the code to fail.\n"
        "Provide a line-by-line analysis of the errors with brief explanations."
    )


def render_test_cases(code: str, language: Optional[str] = None) -> str:
    return (
        f"Generate comprehensive test cases for the following {language or GENERIC_LANGUAGE}:\n\n"
        f"{_fenced(code)}\n\n"
        "Please provide a variety of test cases including normal cases, edge cases, and error cases."
    )


def render_beautify(code: str, language: Optional[str] = None) -> str:
    return (
        f"Beautify and format the following {language or GENERIC_LANGUAGE} to improve readability:\n\n"
        f"{_fenced(code)}\n\n"
        "Please maintain the original functionality while making it more readable and well-structured."
    )


def render_debug(code: str, language: Optional[str] = None) -> str:
    return (
        f"Debug the following {language or GENERIC_LANGUAGE} and identify any errors or issues:\n\n"
        f"{_fenced(code)}\n\n"
        "Please provide a detailed analysis of any errors found and suggest fixes."
    )


def render_performance(code: str, language: Optional[str] = None) -> str:
    return (
        f"Analyze the execution time and memory usage of the following {language or GENERIC_LANGUAGE}:\n\n"
        f"{_fenced(code)}\n\n"
        "Please provide a detailed analysis of time complexity, space complexity, and suggest optimizations."
    )


def render_summary(content: str, summary_length: str = "medium", summary_type: str = "general") -> str:
    return (
        "Please summarize the following content:\n\n"
        f"{_fenced(content)}\n\n"
        f"Please provide a {summary_length} summary in {summary_type} style."
    )


def render_security(code: str, language: Optional[str] = None) -> str:
    return (
        f"Analyze the following {language or GENERIC_LANGUAGE} for security vulnerabilities:\n\n"
        f"{_fenced(code)}\n\n"
        "Please provide a detailed security analysis including vulnerability types, severity levels, "
        "line numbers, and recommended fixes."
    )


_RENDERERS: Dict[TaskKind, Callable[[TaskRequest], str]] = {
    TaskKind.GENERATE_CODE: lambda r: render_generate_code(r.primary_text, r.language),
    TaskKind.GENERATE_REVIEW: lambda r: r.primary_text,
    TaskKind.GENERATE_COMPLEXITY: lambda r: r.primary_text,
    TaskKind.COMPARE_CODE: lambda r: render_compare_code(r.primary_text, r.secondary_text or "", r.language),
    TaskKind.GENERATE_TEST_CASES: lambda r: render_test_cases(r.primary_text, r.language),
    TaskKind.BEAUTIFY_CODE: lambda r: render_beautify(r.primary_text, r.language),
    TaskKind.DEBUG_CODE: lambda r: render_debug(r.primary_text, r.language),
    TaskKind.ANALYZE_PERFORMANCE: lambda r: render_performance(r.primary_text, r.language),
    TaskKind.SUMMARIZE_CONTENT: lambda r: render_summary(r.primary_text, r.summary_length, r.summary_type),
    TaskKind.ANALYZE_SECURITY: lambda r: render_security(r.primary_text, r.language),
}

# Every task must have both an instruction and a template
_missing = set(TaskKind) - set(SYSTEM_INSTRUCTIONS) | set(TaskKind) - set(_RENDERERS)
if _missing:
    raise RuntimeError(f"Prompt tables incomplete for: {sorted(t.value for t in _missing)}")


def build_chat_message(request: TaskRequest) -> ChatMessage:
    """
    Select the system instruction for the request's task and render its user prompt.

    Args:
        request: Task inputs supplied by the caller

    Returns:
        ChatMessage: Instruction and prompt pair for a single exchange
    """
    return ChatMessage(
        task=request.task,
        system_instruction=SYSTEM_INSTRUCTIONS[request.task],
        user_prompt=_RENDERERS[request.task](request),
    )
