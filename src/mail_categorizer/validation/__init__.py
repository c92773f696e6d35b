"""
Lenient parsing of provider output.

- json_extract: brace-depth scanner that locates and decodes the JSON object
- parser: ResponseParser, which fills defaults for missing/invalid fields
- exceptions: MalformedResponse (internal to the parser)
"""

from mail_categorizer.validation.exceptions import MalformedResponse
from mail_categorizer.validation.json_extract import extract_json_object
from mail_categorizer.validation.parser import (
    DEFAULT_REASONING,
    PARSE_FAILURE_REASONING,
    ResponseParser,
)

__all__ = [
    "DEFAULT_REASONING",
    "PARSE_FAILURE_REASONING",
    "MalformedResponse",
    "ResponseParser",
    "extract_json_object",
]
