"""
Parser-internal exceptions.

MalformedResponse never leaves ResponseParser: it is raised by the JSON
extraction stage and absorbed into a default CategorizationResult.
"""


class MalformedResponse(Exception):
    """
    Provider text contains no decodable JSON object.

    Raised when no brace-delimited object can be located, or when every
    located candidate fails to decode.
    """

    def __init__(self, message: str, raw_content: str | None = None, reason: str | None = None):
        """
        Initialize malformed response error.

        Args:
            message: Error description
            raw_content: First 500 chars of the provider text (for debugging)
            reason: Underlying decode error message
        """
        super().__init__(message)
        self.message = message
        self.details: dict[str, str] = {}
        if raw_content:
            # Include first 500 chars for debugging, avoid excessive logging
            self.details["content_snippet"] = raw_content[:500]
        if reason:
            self.details["reason"] = reason

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message
