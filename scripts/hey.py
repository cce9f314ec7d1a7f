#!/usr/bin/env python3
"""
Connectivity check for the Groq API.

Sends one question with a generic assistant instruction and prints the
trimmed answer. Useful for verifying GROQ_API_KEY and the configured model
before starting the service.

Usage:
    python scripts/hey.py ["your question"] [--model MODEL] [--temperature 0.7]
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

# Add the project root to the path to import codeassist
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from codeassist.llm import GroqClient, LLMError  # noqa: E402
from codeassist.models import ChatMessage  # noqa: E402
from codeassist.utils import ConfigurationError, load_and_validate_env  # noqa: E402

DEFAULT_QUERY = "Explain the importance of cybersecurity in 3 bullet points."


async def run_request(query: str, model: Optional[str] = None, temperature: Optional[float] = None) -> str:
    client = GroqClient(load_and_validate_env())
    chat = ChatMessage(system_instruction="You are a helpful assistant.", user_prompt=query)
    try:
        return await client.complete(chat, model=model, temperature=temperature)
    finally:
        await client.close()


def main():
    parser = argparse.ArgumentParser(description="Send a single question to the Groq API")
    parser.add_argument("query", nargs="?", default=DEFAULT_QUERY, help="Question to ask")
    parser.add_argument("--model", default=None, help="Override the configured model")
    parser.add_argument("--temperature", type=float, default=None, help="Sampling temperature")
    args = parser.parse_args()

    try:
        answer = asyncio.run(run_request(args.query, args.model, args.temperature))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)
    except LLMError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(answer)


if __name__ == "__main__":
    main()
