"""
Provider registry and active-provider selection.

The registry is built once at startup from ``Settings`` by
``load_provider_registry`` and is immutable afterwards, so it can be shared
by any number of concurrent categorizations without locking.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from mail_categorizer.config import Settings
from mail_categorizer.models.enums import ProviderName, WireFormat


logger = structlog.get_logger(__name__)


# Preference order favours the providers believed to have the most generous
# free-tier quota. It is fixed here and not derived from configuration or
# declaration order; change it by editing this tuple.
PREFERENCE_ORDER: tuple[ProviderName, ...] = (
    ProviderName.DEEPSEEK,
    ProviderName.GROQ,
    ProviderName.OLLAMA,
    ProviderName.MISTRAL,
    ProviderName.ANTHROPIC,
    ProviderName.OPENAI,
)


class ProviderConfig(BaseModel):
    """Connection details for one AI provider."""

    model_config = ConfigDict(frozen=True)

    name: ProviderName
    enabled: bool = False
    credential: Optional[str] = Field(default=None, repr=False)
    base_address: str
    model: str
    request_path: str
    wire_format: WireFormat

    @property
    def url(self) -> str:
        return f"{self.base_address.rstrip('/')}{self.request_path}"


class ProviderRegistry:
    """
    Read-only mapping of provider name to ProviderConfig.

    Iteration follows declaration order, which deliberately plays no part in
    provider selection (see ``select_active_provider``).
    """

    def __init__(self, providers: list[ProviderConfig]):
        self._providers: Mapping[ProviderName, ProviderConfig] = MappingProxyType(
            {provider.name: provider for provider in providers}
        )

    def get(self, name: ProviderName) -> Optional[ProviderConfig]:
        return self._providers.get(name)

    def __getitem__(self, name: ProviderName) -> ProviderConfig:
        return self._providers[name]

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[ProviderConfig]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)

    def enabled(self) -> list[ProviderConfig]:
        return [provider for provider in self if provider.enabled]

    def __repr__(self) -> str:
        names = ", ".join(provider.name.value for provider in self)
        return f"{self.__class__.__name__}({names})"


def select_active_provider(registry: ProviderRegistry) -> Optional[ProviderName]:
    """
    Pick the provider used for AI categorization.

    Returns the first provider in ``PREFERENCE_ORDER`` whose config is
    enabled, or None when every provider is disabled.
    """
    for name in PREFERENCE_ORDER:
        provider = registry.get(name)
        if provider is not None and provider.enabled:
            return name
    return None


def load_provider_registry(settings: Settings) -> ProviderRegistry:
    """
    Build the provider registry from settings.

    A provider is enabled when its credential is set; Ollama needs no
    credential and is enabled when its base URL is set explicitly.
    """
    providers = [
        ProviderConfig(
            name=ProviderName.DEEPSEEK,
            enabled=bool(settings.DEEPSEEK_API_KEY),
            credential=settings.DEEPSEEK_API_KEY,
            base_address=settings.DEEPSEEK_API_BASE_URL,
            model=settings.DEEPSEEK_MODEL,
            request_path="/v1/chat/completions",
            wire_format=WireFormat.OPENAI_COMPATIBLE,
        ),
        ProviderConfig(
            name=ProviderName.OPENAI,
            enabled=bool(settings.OPENAI_API_KEY),
            credential=settings.OPENAI_API_KEY,
            base_address=settings.OPENAI_API_BASE_URL,
            model=settings.OPENAI_MODEL,
            request_path="/v1/chat/completions",
            wire_format=WireFormat.OPENAI_COMPATIBLE,
        ),
        ProviderConfig(
            name=ProviderName.OLLAMA,
            enabled=bool(settings.OLLAMA_API_BASE_URL),
            base_address=settings.OLLAMA_API_BASE_URL or "http://localhost:11434",
            model=settings.OLLAMA_MODEL,
            request_path="/api/chat",
            wire_format=WireFormat.OLLAMA_STYLE,
        ),
        ProviderConfig(
            name=ProviderName.GROQ,
            enabled=bool(settings.GROQ_API_KEY),
            credential=settings.GROQ_API_KEY,
            base_address=settings.GROQ_API_BASE_URL,
            model=settings.GROQ_MODEL,
            request_path="/openai/v1/chat/completions",
            wire_format=WireFormat.OPENAI_COMPATIBLE,
        ),
        ProviderConfig(
            name=ProviderName.MISTRAL,
            enabled=bool(settings.MISTRAL_API_KEY),
            credential=settings.MISTRAL_API_KEY,
            base_address=settings.MISTRAL_API_BASE_URL,
            model=settings.MISTRAL_MODEL,
            request_path="/v1/chat/completions",
            wire_format=WireFormat.OPENAI_COMPATIBLE,
        ),
        ProviderConfig(
            name=ProviderName.ANTHROPIC,
            enabled=bool(settings.ANTHROPIC_API_KEY),
            credential=settings.ANTHROPIC_API_KEY,
            base_address=settings.ANTHROPIC_API_BASE_URL,
            model=settings.ANTHROPIC_MODEL,
            request_path="/v1/messages",
            wire_format=WireFormat.ANTHROPIC,
        ),
    ]

    registry = ProviderRegistry(providers)
    logger.debug(
        "Provider registry loaded",
        enabled=[provider.name.value for provider in registry.enabled()],
    )
    return registry
