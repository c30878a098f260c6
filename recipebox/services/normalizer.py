from __future__ import annotations

import json
import re
from typing import Any

from recipebox.services.errors import MalformedResponseError, ParseError

_LEADING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\r?\n?")
_TRAILING_FENCE = re.compile(r"\r?\n?```$")


def extract_message_content(envelope: Any) -> str:
    """Return ``choices[0].message.content`` from a chat-completions envelope."""
    try:
        content = envelope["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as error:
        raise MalformedResponseError("Model response has no message content") from error

    if not isinstance(content, str):
        raise MalformedResponseError(
            f"Model message content is {type(content).__name__}, expected text"
        )
    return content


def strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_content(content: str) -> Any:
    cleaned = strip_code_fence(content)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as error:
        preview = cleaned[:80]
        raise ParseError(f"Model content is not valid JSON: {preview!r}", content=content) from error


def normalize_response(envelope: Any) -> Any:
    return parse_content(extract_message_content(envelope))
