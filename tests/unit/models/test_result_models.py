"""Unit tests for the core data models."""

import pytest
from pydantic import ValidationError

from mail_categorizer.models import (
    DEFAULT_REPLY,
    CategorizationResult,
    Category,
    Email,
    EmailAddress,
    ReplySuggestion,
)


class TestCategory:
    """Tests for the category taxonomy."""

    def test_taxonomy_order(self):
        assert Category.values() == [
            "Interested",
            "MeetingBooked",
            "NotInterested",
            "Spam",
            "OutOfOffice",
        ]

    def test_default_is_first_category(self):
        assert Category.default() is Category.INTERESTED

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            Category("Meeting Booked")


class TestEmail:
    """Tests for the Email input model."""

    def test_empty_fields_default_to_empty_strings(self):
        email = Email()

        assert email.subject == ""
        assert email.body == ""
        assert email.sender_display == ""

    def test_from_fields_normalises_none(self):
        email = Email.from_fields(sender=None, subject=None, body=None)

        assert email.subject == ""
        assert email.body == ""

    def test_from_fields_accepts_plain_sender_string(self):
        email = Email.from_fields(sender="bob@example.com", subject="Hi")

        assert email.sender == EmailAddress(address="bob@example.com")
        assert email.sender_display == "bob@example.com"

    @pytest.mark.parametrize(
        "name,address,expected",
        [
            ("Jane Doe", "jane@example.com", "Jane Doe <jane@example.com>"),
            (None, "jane@example.com", "jane@example.com"),
            ("Jane Doe", "", "Jane Doe"),
            (None, "", ""),
        ],
    )
    def test_sender_display(self, name, address, expected):
        assert EmailAddress(name=name, address=address).display() == expected

    def test_email_is_immutable(self):
        email = Email(subject="Hi")

        with pytest.raises(ValidationError):
            email.subject = "Changed"


class TestCategorizationResult:
    """Tests for result invariants."""

    def test_requires_at_least_one_reply(self):
        with pytest.raises(ValidationError):
            CategorizationResult(category=Category.SPAM, reasoning="spam", replies=[])

    def test_requires_non_empty_reasoning(self):
        with pytest.raises(ValidationError):
            CategorizationResult(
                category=Category.SPAM,
                reasoning="",
                replies=[ReplySuggestion(body="ok")],
            )

    def test_rejects_category_outside_taxonomy(self):
        with pytest.raises(ValidationError):
            CategorizationResult(
                category="Bogus",
                reasoning="x",
                replies=[ReplySuggestion(body="ok")],
            )

    @pytest.mark.parametrize("body", ["", "   ", "\n"])
    def test_reply_body_must_not_be_blank(self, body):
        with pytest.raises(ValidationError):
            ReplySuggestion(body=body)

    def test_with_default_reply(self):
        result = CategorizationResult.with_default_reply(Category.INTERESTED, "because")

        assert result.category is Category.INTERESTED
        assert result.reasoning == "because"
        assert result.reply_texts == [DEFAULT_REPLY]
        assert result.replies[0].subject is None

    def test_serializes_category_as_taxonomy_string(self):
        result = CategorizationResult.with_default_reply(Category.OUT_OF_OFFICE, "away")

        data = result.model_dump(mode="json")

        assert data["category"] == "OutOfOffice"
        assert data["replies"] == [{"subject": None, "body": DEFAULT_REPLY}]
