"""
Output models for the categorization core.

A CategorizationResult is always fully populated: a member of the category
taxonomy, a non-empty reasoning string and at least one reply suggestion
with a non-empty body. The model validators enforce this so that no code
path can hand a partial result back to a caller.
"""

from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mail_categorizer.models.enums import Category, ProviderName, WireFormat


class ResponseKeys(NamedTuple):
    """JSON keys the model is asked to return (prompt and parser share these)."""

    category: str = "category"
    reasoning: str = "reasoning"
    replies: str = "replies"


RESPONSE_KEYS = ResponseKeys()
DEFAULT_REPLY = "Thank you for your email. I will get back to you shortly."


class ReplySuggestion(BaseModel):
    """A single drafted reply."""

    model_config = ConfigDict(frozen=True)

    subject: Optional[str] = Field(default=None, description="Optional reply subject")
    body: str = Field(..., min_length=1, description="Reply text")

    @field_validator("body")
    @classmethod
    def body_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Reply body must not be blank")
        return v


class CategorizationResult(BaseModel):
    """Category, reasoning and reply suggestions for one email."""

    model_config = ConfigDict(frozen=True)

    category: Category = Field(..., description="One of the fixed taxonomy categories")
    reasoning: str = Field(..., min_length=1, description="Human-readable explanation")
    replies: list[ReplySuggestion] = Field(
        ...,
        min_length=1,
        description="Ordered reply suggestions (at least one)",
    )

    @classmethod
    def with_default_reply(cls, category: Category, reasoning: str) -> "CategorizationResult":
        return cls(
            category=category,
            reasoning=reasoning,
            replies=[ReplySuggestion(body=DEFAULT_REPLY)],
        )

    @property
    def reply_texts(self) -> list[str]:
        return [reply.body for reply in self.replies]


class ProviderSummary(BaseModel):
    """Diagnostic view of one provider (never includes credentials)."""

    enabled: bool
    model: str
    wire_format: WireFormat


class ProviderStatus(BaseModel):
    """Diagnostic view of the provider registry."""

    active_provider: Optional[ProviderName] = Field(
        default=None,
        description="Provider used for AI categorization, or None for rules only",
    )
    fallback_available: bool = Field(
        default=True,
        description="Rule-based categorization is always available",
    )
    providers: dict[str, ProviderSummary] = Field(default_factory=dict)
