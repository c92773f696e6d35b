"""
Protocol dispatcher.

Routes a rendered prompt to the wire-format client matching the provider's
``wire_format`` and returns the raw generated text. One outbound request per
call; no retries.
"""

from typing import Optional

import httpx
import structlog

from mail_categorizer.llm.anthropic_client import AnthropicClient
from mail_categorizer.llm.base_client import BaseWireClient
from mail_categorizer.llm.exceptions import ProviderError
from mail_categorizer.llm.ollama_client import OllamaClient
from mail_categorizer.llm.openai_client import OpenAICompatibleClient
from mail_categorizer.models.enums import WireFormat
from mail_categorizer.providers.registry import ProviderConfig


logger = structlog.get_logger(__name__)


# Exactly one client per WireFormat member. Adding a format means adding a
# member and a client here; Dispatcher refuses to start with a gap.
WIRE_CLIENTS: dict[WireFormat, type[BaseWireClient]] = {
    WireFormat.OPENAI_COMPATIBLE: OpenAICompatibleClient,
    WireFormat.ANTHROPIC: AnthropicClient,
    WireFormat.OLLAMA_STYLE: OllamaClient,
}


class Dispatcher:
    """
    Send prompts to providers over HTTP.

    Holds one pooled ``httpx.AsyncClient`` (created lazily) and one stateless
    client per wire format. Safe to share across concurrent categorizations.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        connection_limits: Optional[httpx.Limits] = None,
    ):
        """
        Initialize dispatcher.

        Args:
            timeout: Per-request timeout in seconds
            max_tokens: max_tokens sent to providers
            temperature: temperature sent by the OpenAI-compatible format
            transport: Optional httpx transport (tests use httpx.MockTransport)
            connection_limits: httpx connection pool limits
        """
        missing = set(WireFormat) - set(WIRE_CLIENTS)
        if missing:
            raise RuntimeError(
                f"No wire client for formats: {sorted(f.value for f in missing)}"
            )

        self.timeout = timeout
        self.clients: dict[WireFormat, BaseWireClient] = {
            wire_format: client_cls(max_tokens=max_tokens, temperature=temperature)
            for wire_format, client_cls in WIRE_CLIENTS.items()
        }

        self._transport = transport
        self._connection_limits = connection_limits or httpx.Limits(
            max_keepalive_connections=5,
            max_connections=20,
            keepalive_expiry=30.0,
        )
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "Dispatcher initialized",
            timeout=timeout,
            max_tokens=max_tokens,
            wire_formats=[f.value for f in self.clients],
        )

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def client_for(self, wire_format: WireFormat) -> BaseWireClient:
        try:
            return self.clients[WireFormat(wire_format)]
        except (KeyError, ValueError) as e:
            raise ProviderError(
                f"Unknown wire format: {wire_format}",
                details={"wire_format": str(wire_format)},
            ) from e

    async def dispatch(self, provider: ProviderConfig, prompt: str) -> str:
        """
        Send the prompt to the provider and return the raw response text.

        Args:
            provider: Provider configuration (selects the wire format)
            prompt: Rendered categorization prompt

        Returns:
            Generated text, not yet parsed

        Raises:
            ProviderError: Any failure to obtain response text
        """
        wire_client = self.client_for(provider.wire_format)
        return await wire_client.send(self._get_client(), provider, prompt)

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed dispatcher HTTP client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
