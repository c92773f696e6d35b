"""
Response parser: provider text to CategorizationResult.

Parsing never fails. Missing or invalid fields are silently corrected:

- category missing or outside the taxonomy -> first taxonomy category
- reasoning missing or blank               -> "AI categorization"
- replies missing, not a list, or empty    -> the single default reply

When no JSON object can be extracted at all, a complete default result is
returned instead. These corrections are not failures and do not trigger the
rule-based fallback.
"""

from typing import Any

import structlog

from mail_categorizer.models.enums import Category
from mail_categorizer.models.results import (
    DEFAULT_REPLY,
    RESPONSE_KEYS,
    CategorizationResult,
    ReplySuggestion,
)
from mail_categorizer.monitoring.metrics import parser_corrections_total
from mail_categorizer.validation.exceptions import MalformedResponse
from mail_categorizer.validation.json_extract import extract_json_object


logger = structlog.get_logger(__name__)

DEFAULT_REASONING = "AI categorization"
PARSE_FAILURE_REASONING = "Failed to parse AI response, using default"


class ResponseParser:
    """Turn raw provider text into a fully populated CategorizationResult."""

    def parse(self, raw_text: str) -> CategorizationResult:
        """
        Parse provider output.

        Args:
            raw_text: Raw text returned by the dispatcher

        Returns:
            CategorizationResult; never raises
        """
        try:
            data = extract_json_object(raw_text)
        except MalformedResponse as e:
            logger.error("Failed to parse AI response", error=e.message, **e.details)
            parser_corrections_total.labels(field="response").inc()
            return self.default_result()

        try:
            return CategorizationResult(
                category=self._category(data.get(RESPONSE_KEYS.category)),
                reasoning=self._reasoning(data.get(RESPONSE_KEYS.reasoning)),
                replies=self._replies(data.get(RESPONSE_KEYS.replies)),
            )
        except Exception as e:
            logger.error(
                "Unexpected error building result from AI response",
                error=str(e),
                error_type=type(e).__name__,
            )
            parser_corrections_total.labels(field="response").inc()
            return self.default_result()

    @staticmethod
    def default_result() -> CategorizationResult:
        return CategorizationResult.with_default_reply(
            Category.default(), PARSE_FAILURE_REASONING
        )

    def _category(self, value: Any) -> Category:
        if isinstance(value, str) and value in Category.values():
            return Category(value)

        logger.warning("Invalid category in AI response", category=repr(value)[:100])
        parser_corrections_total.labels(field="category").inc()
        return Category.default()

    def _reasoning(self, value: Any) -> str:
        if isinstance(value, str) and value.strip():
            return value

        parser_corrections_total.labels(field="reasoning").inc()
        return DEFAULT_REASONING

    def _replies(self, value: Any) -> list[ReplySuggestion]:
        replies: list[ReplySuggestion] = []
        if isinstance(value, list):
            for item in value:
                reply = self._reply(item)
                if reply is not None:
                    replies.append(reply)

        if not replies:
            logger.warning(
                "No valid replies in AI response, using default reply",
                replies_type=type(value).__name__,
            )
            parser_corrections_total.labels(field="replies").inc()
            replies = [ReplySuggestion(body=DEFAULT_REPLY)]
        return replies

    @staticmethod
    def _reply(item: Any) -> ReplySuggestion | None:
        """Accept a plain string or a ``{"subject", "body"}`` object."""
        if isinstance(item, str):
            return ReplySuggestion(body=item) if item.strip() else None

        if isinstance(item, dict):
            body = item.get("body")
            if isinstance(body, str) and body.strip():
                subject = item.get("subject")
                return ReplySuggestion(
                    subject=subject if isinstance(subject, str) and subject else None,
                    body=body,
                )
        return None
