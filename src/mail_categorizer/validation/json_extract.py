"""
Lenient extraction of a JSON object from free-form model text.

Models often wrap the requested JSON in prose or code fences. Only the
region opened by the first ``{`` is considered: the scanner walks forward
from it once, tracking brace depth and ignoring braces inside JSON string
literals, so a ``}`` inside a reasoning string does not end the object
early. If that region is unclosed or does not decode to an object, the
response is malformed; later regions are never tried.
"""

import json
from typing import Any, Optional

import structlog

from mail_categorizer.validation.exceptions import MalformedResponse


logger = structlog.get_logger(__name__)


def find_balanced_end(text: str, start: int) -> Optional[int]:
    """
    Return the exclusive end of the ``{...}`` region opening at ``start``.

    Single forward pass; returns None when the region is never closed.

    Examples:
        >>> find_balanced_end('x {"a": "}"} y', 2)
        12
    """
    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1
    return None


def first_brace_span(text: str) -> Optional[tuple[int, int]]:
    """``(start, end)`` of the region opened by the first ``{``, or None."""
    start = text.find("{")
    if start == -1:
        return None
    end = find_balanced_end(text, start)
    if end is None:
        return None
    return start, end


def extract_json_object(text: Any) -> dict[str, Any]:
    """
    Decode the first balanced ``{...}`` region of ``text``.

    Args:
        text: Raw provider output

    Returns:
        Decoded JSON object

    Raises:
        MalformedResponse: No balanced region, or the region does not decode
            to a JSON object (including nesting too deep to decode)
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedResponse(
            "Provider response is empty or not text",
            reason=f"Got {type(text).__name__}",
        )

    span = first_brace_span(text)
    if span is None:
        raise MalformedResponse(
            "No JSON object found in provider response",
            raw_content=text,
            reason="No balanced braces",
        )

    start, end = span
    try:
        parsed = json.loads(text[start:end])
    except json.JSONDecodeError as e:
        reason = f"{e.msg} at line {e.lineno} col {e.colno}"
        logger.debug("Brace region is not valid JSON", start=start, end=end, error=reason)
        raise MalformedResponse(
            "Failed to decode JSON object in provider response",
            raw_content=text,
            reason=reason,
        ) from e
    except RecursionError as e:
        raise MalformedResponse(
            "Failed to decode JSON object in provider response",
            raw_content=text,
            reason="Nesting too deep to decode",
        ) from e

    return parsed
