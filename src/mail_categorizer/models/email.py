"""
Input model for the categorization core.

The email is owned by the mailbox sync layer; this core only reads the
sender, subject and plain-text body.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EmailAddress(BaseModel):
    """Mailbox address with optional display name."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Display name")
    address: str = Field(default="", description="Mailbox address")

    def display(self) -> str:
        """Render as ``Name <address>``, or the bare address when unnamed."""
        if self.name and self.address:
            return f"{self.name} <{self.address}>"
        return self.name or self.address


class Email(BaseModel):
    """
    Email to categorize.

    Subject and body may be empty; missing values are normalised to empty
    strings so they never render as ``None`` placeholders.
    """

    model_config = ConfigDict(frozen=True)

    sender: Optional[EmailAddress] = Field(default=None, description="Sender address")
    subject: str = Field(default="", description="Subject line")
    body: str = Field(default="", description="Plain-text body")

    @classmethod
    def from_fields(
        cls,
        sender: str | EmailAddress | None = None,
        subject: Optional[str] = None,
        body: Optional[str] = None,
    ) -> "Email":
        """Build an Email from loosely-typed fields (``None`` becomes empty)."""
        if isinstance(sender, str):
            sender = EmailAddress(address=sender)
        return cls(sender=sender, subject=subject or "", body=body or "")

    @property
    def sender_display(self) -> str:
        return self.sender.display() if self.sender else ""
