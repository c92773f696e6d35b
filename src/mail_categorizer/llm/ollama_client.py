"""
Ollama chat format.

Request:
    POST {base}/api/chat
    {"model": ..., "messages": [{"role": "user", "content": ...}]}

No authentication header is sent.

Response text: message.content

Without ``"stream": false`` Ollama answers with newline-delimited JSON
chunks, each carrying a fragment in message.content. Both the single-object
and the streamed body are accepted; streamed fragments are concatenated.
"""

import json
from typing import Any

import httpx

from mail_categorizer.llm.base_client import BaseWireClient
from mail_categorizer.llm.exceptions import ProviderError
from mail_categorizer.models.enums import WireFormat
from mail_categorizer.providers.registry import ProviderConfig


class OllamaClient(BaseWireClient):
    """Client for the Ollama /api/chat wire format."""

    wire_format = WireFormat.OLLAMA_STYLE

    def build_payload(self, provider: ProviderConfig, prompt: str) -> dict[str, Any]:
        return {
            "model": provider.model,
            "messages": self.user_messages(prompt),
        }

    def build_headers(self, provider: ProviderConfig) -> dict[str, str]:
        return {"Content-Type": "application/json"}

    def decode_response(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            lines = [line for line in response.text.splitlines() if line.strip()]
            if len(lines) < 2:
                raise
            chunks = [json.loads(line) for line in lines]

        fragments = []
        for chunk in chunks:
            fragments.append(self.extract_text(chunk))
        return {"message": {"role": "assistant", "content": "".join(fragments)}}

    def extract_text(self, data: Any) -> str:
        try:
            content = data["message"]["content"]
        except (KeyError, TypeError) as e:
            raise ProviderError(
                "Response missing message.content",
                details={"error_type": type(e).__name__},
            ) from e
        return self._require_text(content, "message.content")
