"""
Rule-based categorization.

Deterministic keyword matching used whenever no AI provider is configured
or the AI attempt fails. It has no failure mode: every email gets a
category, a reasoning string and at least one reply.
"""

from typing import Mapping, Sequence

import structlog

from mail_categorizer.models.email import Email
from mail_categorizer.models.enums import Category
from mail_categorizer.models.results import (
    DEFAULT_REPLY,
    CategorizationResult,
    ReplySuggestion,
)
from mail_categorizer.rules.keywords import CATEGORY_KEYWORDS, REPLY_TEMPLATES


logger = structlog.get_logger(__name__)


class RuleBasedClassifier:
    """
    Keyword-count classifier.

    The category with the strictly greatest number of matched keywords wins.
    Ties go to the category that comes first in taxonomy order; zero matches
    everywhere yields ``Category.INTERESTED``.
    """

    def __init__(
        self,
        keywords: Mapping[Category, Sequence[str]] = CATEGORY_KEYWORDS,
        reply_templates: Mapping[Category, Sequence[str]] = REPLY_TEMPLATES,
    ):
        self.keywords = {
            category: tuple(keyword.lower() for keyword in phrases)
            for category, phrases in keywords.items()
        }
        self.reply_templates = reply_templates

    def count_matches(self, email: Email) -> dict[Category, int]:
        """Number of keywords of each category found in subject + body."""
        text = f"{email.subject or ''} {email.body or ''}".lower()
        return {
            category: sum(1 for keyword in self.keywords.get(category, ()) if keyword in text)
            for category in Category
        }

    def classify(self, email: Email) -> CategorizationResult:
        """
        Categorize an email by keyword matching.

        Args:
            email: Email to categorize

        Returns:
            CategorizationResult with reasoning
            ``"Rule-based categorization (matched N keywords)"``
        """
        best_category = Category.INTERESTED
        max_matches = 0

        # Iterate in taxonomy order; strict comparison keeps the earlier category on ties
        for category, matches in self.count_matches(email).items():
            if matches > max_matches:
                max_matches = matches
                best_category = category

        logger.debug(
            "Rule-based categorization",
            category=best_category.value,
            matched_keywords=max_matches,
        )

        return CategorizationResult(
            category=best_category,
            reasoning=f"Rule-based categorization (matched {max_matches} keywords)",
            replies=self.replies_for(best_category),
        )

    def replies_for(self, category: Category) -> list[ReplySuggestion]:
        templates = self.reply_templates.get(category) or (DEFAULT_REPLY,)
        return [ReplySuggestion(body=text) for text in templates]
