"""
Anthropic messages format.

Request:
    POST {base}/v1/messages
    x-api-key: <credential>
    anthropic-version: 2023-06-01
    {"model": ..., "max_tokens": 1000,
     "messages": [{"role": "user", "content": ...}]}

Response text: content[0].text
"""

from typing import Any

from mail_categorizer.llm.base_client import BaseWireClient
from mail_categorizer.llm.exceptions import ProviderError
from mail_categorizer.models.enums import WireFormat
from mail_categorizer.providers.registry import ProviderConfig


ANTHROPIC_VERSION = "2023-06-01"


class AnthropicClient(BaseWireClient):
    """Client for the Anthropic messages wire format."""

    wire_format = WireFormat.ANTHROPIC

    def build_payload(self, provider: ProviderConfig, prompt: str) -> dict[str, Any]:
        return {
            "model": provider.model,
            "max_tokens": self.max_tokens,
            "messages": self.user_messages(prompt),
        }

    def build_headers(self, provider: ProviderConfig) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": provider.credential or "",
            "anthropic-version": ANTHROPIC_VERSION,
        }

    def extract_text(self, data: Any) -> str:
        try:
            text = data["content"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                "Response missing content[0].text",
                details={"error_type": type(e).__name__},
            ) from e
        return self._require_text(text, "content[0].text")
