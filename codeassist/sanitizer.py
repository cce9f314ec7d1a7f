"""
Response cleanup for model completions.

The model occasionally echoes its own system instruction back as a header
line ("System Instruction: ...", "Role & Responsibilities: ...", a
"Senior Code Reviewer with N years of Experience" persona line). These
rules strip such fragments from the matched phrase to the end of the line.

The rules are heuristic. Tasks whose output is structured (beautified code,
security reports, summaries, ...) skip cleaning entirely; see TaskKind.clean.
"""

import re
from typing import List, Optional, Pattern

# Any character except a line terminator, and the end-of-line lookahead
_LINE = r"[^\r\n\u2028\u2029]*?"
_EOL = r"(?=[\r\n\u2028\u2029]|\Z)"

# Applied in order; each runs from a fixed phrase to end-of-line or end-of-string
BOILERPLATE_PATTERNS: List[Pattern[str]] = [
    re.compile(r"AI System Instruction:" + _LINE + _EOL, re.IGNORECASE),
    re.compile(r"System Instruction:" + _LINE + _EOL, re.IGNORECASE),
    re.compile(r"Role & Responsibilities:" + _LINE + _EOL, re.IGNORECASE),
    re.compile(r"Here's a solid system instruction" + _LINE + _EOL, re.IGNORECASE),
    re.compile(r"Senior Code Reviewer" + _LINE + "Experience" + _LINE + _EOL, re.IGNORECASE),
    re.compile(r"expert code reviewer" + _LINE + "years" + _LINE + "experience" + _LINE + _EOL, re.IGNORECASE),
]


def clean_response(response: Optional[str]) -> str:
    """
    Remove echoed system-instruction fragments and trim whitespace.

    Args:
        response: Raw completion text; None is treated as empty

    Returns:
        str: Cleaned text
    """
    if not response:
        return ""

    cleaned = response
    for pattern in BOILERPLATE_PATTERNS:
        cleaned = pattern.sub("", cleaned)

    return cleaned.strip()
