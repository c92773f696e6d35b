"""
Abstract base client for provider wire formats.

Each WireFormat has exactly one client subclass that knows how to shape the
request body and headers for that format and where the generated text lives
in the response. The HTTP exchange itself (POST, status check, JSON decode,
error mapping) is shared here so every format fails the same way: with a
single ProviderError.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import httpx
import structlog

from mail_categorizer.llm.exceptions import ProviderError
from mail_categorizer.models.enums import WireFormat
from mail_categorizer.monitoring.metrics import provider_latency_seconds
from mail_categorizer.providers.registry import ProviderConfig


logger = structlog.get_logger(__name__)


class BaseWireClient(ABC):
    """
    Base class for wire-format clients.

    Subclasses implement ``build_payload``, ``build_headers`` and
    ``extract_text``. They hold no per-request state, so one instance is
    shared by all concurrent categorizations.

    Does NOT handle:
    - Prompt construction (PromptBuilder)
    - Response parsing into a CategorizationResult (ResponseParser)
    - Retries (a failed request falls back to rules, it is never repeated)
    """

    wire_format: ClassVar[WireFormat]

    def __init__(self, max_tokens: int = 1000, temperature: float = 0.7):
        self.max_tokens = max_tokens
        self.temperature = temperature

    @staticmethod
    def user_messages(prompt: str) -> list[dict[str, str]]:
        return [{"role": "user", "content": prompt}]

    @abstractmethod
    def build_payload(self, provider: ProviderConfig, prompt: str) -> dict[str, Any]:
        """Return the JSON request body for this format."""

    @abstractmethod
    def build_headers(self, provider: ProviderConfig) -> dict[str, str]:
        """Return the HTTP headers for this format (including auth, if any)."""

    @abstractmethod
    def extract_text(self, data: Any) -> str:
        """
        Pull the generated text out of a decoded response body.

        Raises:
            ProviderError: The expected field is missing or not a string
        """

    def decode_response(self, response: httpx.Response) -> Any:
        """Decode the response body. Raises ValueError on a non-JSON body."""
        return response.json()

    async def send(
        self,
        http_client: httpx.AsyncClient,
        provider: ProviderConfig,
        prompt: str,
    ) -> str:
        """
        POST the prompt to the provider and return the generated text.

        Args:
            http_client: Shared async HTTP client (carries the timeout)
            provider: Target provider configuration
            prompt: Rendered categorization prompt

        Returns:
            Raw generated text, unparsed

        Raises:
            ProviderError: Network error, timeout, non-2xx status, non-JSON
                body or missing response field
        """
        start_time = time.perf_counter()
        success = "false"

        logger.info(
            "Sending categorization request",
            provider=provider.name.value,
            model=provider.model,
            wire_format=self.wire_format.value,
            prompt_length=len(prompt),
        )

        try:
            response = await http_client.post(
                provider.url,
                json=self.build_payload(provider, prompt),
                headers=self.build_headers(provider),
            )
            response.raise_for_status()
            data = self.decode_response(response)
            text = self.extract_text(data)
            success = "true"

        except httpx.TimeoutException as e:
            raise ProviderError(
                f"Request to {provider.name.value} timed out",
                details={"provider": provider.name.value, "error_type": type(e).__name__},
            ) from e

        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"{provider.name.value} returned HTTP {e.response.status_code}",
                details={
                    "provider": provider.name.value,
                    "status": e.response.status_code,
                    "error": e.response.text[:500],
                },
            ) from e

        except httpx.HTTPError as e:
            raise ProviderError(
                f"Network error calling {provider.name.value}: {e}",
                details={"provider": provider.name.value, "error_type": type(e).__name__},
            ) from e

        except ValueError as e:
            # response.json() on a non-JSON body
            raise ProviderError(
                f"Invalid JSON response from {provider.name.value}",
                details={"provider": provider.name.value, "parse_error": str(e)},
            ) from e

        finally:
            latency = time.perf_counter() - start_time
            provider_latency_seconds.labels(
                provider=provider.name.value, success=success
            ).observe(latency)

        logger.info(
            "Provider response received",
            provider=provider.name.value,
            model=provider.model,
            latency_ms=int((time.perf_counter() - start_time) * 1000),
            response_length=len(text),
        )
        return text

    @staticmethod
    def _require_text(value: Any, field_path: str) -> str:
        if not isinstance(value, str):
            raise ProviderError(
                f"Response field {field_path} missing or not text",
                details={"field": field_path, "type": type(value).__name__},
            )
        return value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"wire_format={self.wire_format.value}, "
            f"max_tokens={self.max_tokens})"
        )
