"""
Helpers for reading JSON out of free-form model replies.

Models often wrap JSON in markdown code fences or add a sentence before
it. These helpers strip that noise before handing the text to json.loads.
"""

import json
from typing import Any


def strip_code_fences(text: str) -> str:
    """Return the body of the first ``` fenced block, or the text unchanged."""
    text = text.strip()
    if not text.startswith("```"):
        return text

    body = []
    in_block = False
    for line in text.split("\n"):
        if line.startswith("```") and not in_block:
            in_block = True
            continue
        elif line.startswith("```") and in_block:
            break
        elif in_block:
            body.append(line)
    return "\n".join(body)


def extract_json(text: str) -> Any:
    """
    Parse the first JSON object or array found in a model reply.

    Args:
        text: Raw reply text

    Returns:
        The decoded JSON value

    Raises:
        ValueError: If no JSON value can be decoded
    """
    if not text:
        raise ValueError("Empty response")

    text = strip_code_fences(text)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        error = e

    # Prose around the answer may itself contain brackets
    decoder = json.JSONDecoder()
    for start, char in enumerate(text):
        if char not in "[{":
            continue
        try:
            value, _ = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            continue
        return value

    raise ValueError(f"Response is not valid JSON: {error}")
