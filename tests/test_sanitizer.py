import pytest

from codeassist.sanitizer import BOILERPLATE_PATTERNS, clean_response


SAMPLES = [
    "System Instruction: you are an assistant\nActual answer here",
    "AI System Instruction: be helpful\nRole & Responsibilities: review code\n\nThe loop is off by one.",
    "Here's a solid system instruction for a reviewer\n```python\nprint('hi')\n```",
    "Senior Code Reviewer with 10+ years of Experience in Python\nLooks good overall.",
    "As an expert code reviewer with 15 years of experience, I find:\nBug on line 3",
    "system instruction: lowercase echo\nSYSTEM INSTRUCTION: upper echo\nkept",
    "  nothing to strip here  \n",
    "Senior Code Reviewer\nExperience matters, but not on the same line",
    "",
    "Keep System Instruction: x\r\nNext",
    "System Instruction: x\rReal answer",
    "Senior Code Reviewer System Instruction: x Experience\r\ntail",
    "x AI System Instruction: a Role & Responsibilities: b",
    "Role & Responsibilities: a System Instruction: b\r\nkeep",
    "Answer\u2028System Instruction: echo\u2029kept",
]


def test_strips_echoed_instruction_header():
    raw = "System Instruction: you are an assistant\nActual answer here"
    assert clean_response(raw) == "Actual answer here"


def test_ai_prefixed_header_removed_whole():
    assert clean_response("AI System Instruction: be terse\nDone.") == "Done."


def test_matching_is_case_insensitive():
    assert clean_response("system INSTRUCTION: echo\nReal content") == "Real content"


def test_match_runs_to_end_of_line_only():
    raw = "Answer first. Role & Responsibilities: reviewing\nNext line stays"
    assert clean_response(raw) == "Answer first. \nNext line stays"


def test_match_at_end_of_string():
    raw = "Line one\nHere's a solid system instruction you can use"
    assert clean_response(raw) == "Line one"


def test_reviewer_persona_lines():
    raw = "Senior Code Reviewer with 10 years of Experience\nUse a set instead of a list."
    assert clean_response(raw) == "Use a set instead of a list."

    raw = "As an expert code reviewer with 15 years of experience, I find:\nBug on line 3"
    assert clean_response(raw) == "As an \nBug on line 3"


def test_persona_split_across_lines_is_kept():
    raw = "Senior Code Reviewer\nExperience matters, but not on the same line"
    assert clean_response(raw) == raw


def test_no_match_only_trims():
    assert clean_response("  plain answer\n\n") == "plain answer"
    assert clean_response("def f():\n    return 1") == "def f():\n    return 1"


@pytest.mark.parametrize("raw", [None, "", "   \n\t"])
def test_empty_input_yields_empty_string(raw):
    assert clean_response(raw) == ""


@pytest.mark.parametrize("raw", SAMPLES)
def test_idempotent(raw):
    once = clean_response(raw)
    assert clean_response(once) == once


@pytest.mark.parametrize("raw", SAMPLES)
def test_never_lengthens_or_adds_characters(raw):
    cleaned = clean_response(raw)
    assert len(cleaned) <= len(raw)
    assert set(cleaned) <= set(raw)


def test_pattern_order():
    assert BOILERPLATE_PATTERNS[0].pattern.startswith("AI System Instruction:")
    assert BOILERPLATE_PATTERNS[1].pattern.startswith("System Instruction:")
    assert len(BOILERPLATE_PATTERNS) == 6


def test_crlf_line_ending_is_kept():
    assert clean_response("Keep System Instruction: x\r\nNext") == "Keep \r\nNext"


def test_carriage_return_ends_the_match():
    assert clean_response("System Instruction: x\rReal answer") == "Real answer"


def test_unicode_line_separators_end_the_match():
    assert clean_response("Answer\u2028System Instruction: echo\u2029kept") == "Answer\u2028\u2029kept"


def test_two_rules_on_one_line():
    assert clean_response("x AI System Instruction: a Role & Responsibilities: b") == "x"
    assert clean_response("Role & Responsibilities: a System Instruction: b\r\nkeep") == "keep"


def test_earlier_rule_can_consume_later_rule_anchor():
    raw = "Senior Code Reviewer System Instruction: x Experience\r\ntail"
    assert clean_response(raw) == "Senior Code Reviewer \r\ntail"
