"""
FastAPI dependency injection for the categorization core.

Builds the provider registry once from settings and shares a single
Categorizer (and its pooled HTTP client) across requests.
"""

from functools import lru_cache
from typing import Optional

import httpx

from mail_categorizer.categorizer import Categorizer
from mail_categorizer.config import Settings, settings
from mail_categorizer.llm.dispatcher import Dispatcher
from mail_categorizer.llm.prompt_builder import PromptBuilder
from mail_categorizer.providers.registry import ProviderRegistry, load_provider_registry
from mail_categorizer.rules.classifier import RuleBasedClassifier
from mail_categorizer.validation.parser import ResponseParser


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_provider_registry() -> ProviderRegistry:
    """
    Get the provider registry, loaded once at first use.

    Returns:
        Immutable ProviderRegistry
    """
    return load_provider_registry(get_settings())


def build_categorizer(
    app_settings: Settings,
    registry: ProviderRegistry,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Categorizer:
    """Wire a Categorizer from settings and a registry.

    ``transport`` replaces the network transport of the dispatcher's HTTP
    client (tests pass an httpx.MockTransport).
    """
    return Categorizer(
        registry=registry,
        dispatcher=Dispatcher(
            timeout=app_settings.PROVIDER_TIMEOUT,
            max_tokens=app_settings.LLM_MAX_TOKENS,
            temperature=app_settings.LLM_TEMPERATURE,
            transport=transport,
        ),
        prompt_builder=PromptBuilder(),
        parser=ResponseParser(),
        classifier=RuleBasedClassifier(),
        batch_concurrency=app_settings.BATCH_CONCURRENCY,
    )


@lru_cache()
def get_categorizer() -> Categorizer:
    """
    Get singleton Categorizer.

    Uses @lru_cache so the dispatcher's connection pool is shared by all
    requests.

    Returns:
        Categorizer instance
    """
    return build_categorizer(get_settings(), get_provider_registry())
