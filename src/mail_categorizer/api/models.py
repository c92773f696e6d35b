"""
API-specific request and response models for FastAPI endpoints.

These models wrap the core Email / CategorizationResult models with the
request shapes the routing layer sends.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mail_categorizer.models.email import Email, EmailAddress
from mail_categorizer.models.results import CategorizationResult


class CategorizeRequest(BaseModel):
    """
    Email fields accepted by POST /categorize.

    The sender may be given as a structured ``sender`` object or as a plain
    ``from`` string; ``sender`` wins when both are present.
    """

    model_config = ConfigDict(populate_by_name=True)

    sender: Optional[EmailAddress] = Field(default=None, description="Structured sender")
    from_addr: Optional[str] = Field(
        default=None,
        alias="from",
        description="Sender as a plain string",
    )
    subject: Optional[str] = Field(default="", description="Subject line")
    body: Optional[str] = Field(default="", description="Plain-text body")

    def to_email(self) -> Email:
        return Email.from_fields(
            sender=self.sender or self.from_addr,
            subject=self.subject,
            body=self.body,
        )


class BatchCategorizeRequest(BaseModel):
    """Request for POST /categorize/batch."""

    emails: list[CategorizeRequest] = Field(
        description="Emails to categorize",
        min_length=1,
        max_length=100,  # Soft limit to bound provider load per request
    )


class BatchCategorizeResponse(BaseModel):
    """Results in the same order as the submitted emails."""

    results: list[CategorizationResult]
    count: int = Field(ge=0)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(
        description="Overall status",
        examples=["healthy"],
    )
    version: str = Field(description="Application version")
    services: dict[str, str] = Field(
        description="Component statuses",
        examples=[{"categorization": "healthy"}, {"categorization": "fallback"}],
    )
    timestamp: datetime = Field(description="Check timestamp (UTC)")
