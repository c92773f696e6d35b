"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from mail_categorizer.config import Settings
from mail_categorizer.models.email import Email, EmailAddress
from mail_categorizer.providers.registry import ProviderRegistry, load_provider_registry


# Every provider switch, so tests never pick up keys from the environment
PROVIDER_SWITCHES = (
    "DEEPSEEK_API_KEY",
    "GROQ_API_KEY",
    "OLLAMA_API_BASE_URL",
    "MISTRAL_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
)


def make_settings(**overrides) -> Settings:
    """Settings with every provider disabled unless overridden."""
    values = {switch: None for switch in PROVIDER_SWITCHES}
    values.update(
        APP_NAME="Mail Categorizer (Test)",
        ENVIRONMENT="development",
        LOG_LEVEL="DEBUG",
        PROMETHEUS_ENABLED=False,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with all providers disabled.

    Enable a provider with make_settings instead:
        settings = make_settings(GROQ_API_KEY="gsk-test")
    """
    return make_settings()


@pytest.fixture
def empty_registry(test_settings: Settings) -> ProviderRegistry:
    """Registry in which no provider is enabled."""
    return load_provider_registry(test_settings)


@pytest.fixture
def groq_registry() -> ProviderRegistry:
    """Registry with only Groq enabled (OpenAI-compatible format)."""
    return load_provider_registry(make_settings(GROQ_API_KEY="gsk-test-key"))


@pytest.fixture
def create_test_email():
    """Factory fixture to create Email with custom fields.

    Usage:
        def test_something(create_test_email):
            email = create_test_email(body="Can we schedule a meeting?")
    """
    def _create(
        subject: str = "Quick question",
        body: str = "Hello, hope you are well.",
        sender_name: str | None = "Jane Doe",
        sender_address: str = "jane@example.com",
    ) -> Email:
        return Email(
            sender=EmailAddress(name=sender_name, address=sender_address),
            subject=subject,
            body=body,
        )

    return _create


@pytest.fixture
def interested_email(create_test_email) -> Email:
    """Email that the keyword rules classify as Interested."""
    return create_test_email(
        subject="Pricing question",
        body="I am interested in your product, could you send me a quote and a demo?",
    )


@pytest.fixture
def out_of_office_email(create_test_email) -> Email:
    """Automatic out-of-office reply."""
    return create_test_email(
        subject="Automatic reply: Out of Office",
        body="I am on annual leave and will return on Monday.",
    )


@pytest.fixture
def settings_factory():
    """Factory fixture exposing make_settings to test modules.

    Usage:
        def test_something(settings_factory):
            settings = settings_factory(OPENAI_API_KEY="sk-test")
    """
    return make_settings
