"""Deterministic keyword classifier used as the always-available fallback."""

from mail_categorizer.rules.classifier import RuleBasedClassifier
from mail_categorizer.rules.keywords import CATEGORY_KEYWORDS, REPLY_TEMPLATES

__all__ = ["CATEGORY_KEYWORDS", "REPLY_TEMPLATES", "RuleBasedClassifier"]
