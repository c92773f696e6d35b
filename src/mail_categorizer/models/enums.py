"""
Enumerations for the categorization core.

All enums are closed sets - no values outside these sets are permitted.
"""

from enum import Enum


class Category(str, Enum):
    """
    Closed taxonomy of email categories.

    Declaration order is significant: it is the order rendered in the prompt
    and the tie-break order used by the rule-based classifier. The first
    member is the default whenever a category has to be substituted.
    """

    INTERESTED = "Interested"
    MEETING_BOOKED = "MeetingBooked"
    NOT_INTERESTED = "NotInterested"
    SPAM = "Spam"
    OUT_OF_OFFICE = "OutOfOffice"

    @classmethod
    def default(cls) -> "Category":
        """First category in taxonomy order."""
        return next(iter(cls))

    @classmethod
    def values(cls) -> list[str]:
        return [category.value for category in cls]


class WireFormat(str, Enum):
    """Request/response JSON shape expected by a provider."""

    OPENAI_COMPATIBLE = "openai"
    ANTHROPIC = "anthropic"
    OLLAMA_STYLE = "ollama"


class ProviderName(str, Enum):
    """Identifiers of the AI providers known to the registry."""

    DEEPSEEK = "deepseek"
    OPENAI = "openai"
    OLLAMA = "ollama"
    GROQ = "groq"
    MISTRAL = "mistral"
    ANTHROPIC = "anthropic"
