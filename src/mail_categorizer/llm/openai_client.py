"""
OpenAI-compatible chat completions format.

Used by DeepSeek, Groq, Mistral and OpenAI.

Request:
    POST {base}{path}
    Authorization: Bearer <credential>
    {"model": ..., "messages": [{"role": "user", "content": ...}],
     "max_tokens": 1000, "temperature": 0.7}

Response text: choices[0].message.content
"""

from typing import Any

from mail_categorizer.llm.base_client import BaseWireClient
from mail_categorizer.llm.exceptions import ProviderError
from mail_categorizer.models.enums import WireFormat
from mail_categorizer.providers.registry import ProviderConfig


class OpenAICompatibleClient(BaseWireClient):
    """Client for the OpenAI chat completions wire format."""

    wire_format = WireFormat.OPENAI_COMPATIBLE

    def build_payload(self, provider: ProviderConfig, prompt: str) -> dict[str, Any]:
        return {
            "model": provider.model,
            "messages": self.user_messages(prompt),
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def build_headers(self, provider: ProviderConfig) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {provider.credential}",
        }

    def extract_text(self, data: Any) -> str:
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                "Response missing choices[0].message.content",
                details={"error_type": type(e).__name__},
            ) from e
        return self._require_text(content, "choices[0].message.content")
