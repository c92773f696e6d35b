"""
Pydantic data models for the categorization core.

Includes:
- Enums (Category, WireFormat, ProviderName)
- Input models (Email, EmailAddress)
- Output models (CategorizationResult, ReplySuggestion, ProviderStatus)
"""

from mail_categorizer.models.enums import Category, ProviderName, WireFormat
from mail_categorizer.models.email import Email, EmailAddress
from mail_categorizer.models.results import (
    DEFAULT_REPLY,
    RESPONSE_KEYS,
    CategorizationResult,
    ProviderStatus,
    ProviderSummary,
    ReplySuggestion,
)

__all__ = [
    # Enums
    "Category",
    "ProviderName",
    "WireFormat",
    # Input models
    "Email",
    "EmailAddress",
    # Output models
    "DEFAULT_REPLY",
    "RESPONSE_KEYS",
    "CategorizationResult",
    "ProviderStatus",
    "ProviderSummary",
    "ReplySuggestion",
]
