"""
Exceptions for the provider dispatch layer.

Every failure of an outbound categorization request (network error,
timeout, non-2xx status, unreadable body, missing response field) is
surfaced as a single ProviderError. Callers do not distinguish sub-causes;
the details dict carries them for logging only.
"""


class ProviderError(Exception):
    """
    Raised when a provider request does not yield response text.

    The orchestrator converts this into a rule-based fallback; it never
    reaches the caller of ``categorize_email``.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message
