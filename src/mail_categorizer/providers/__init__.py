"""
Provider registry and selection.

Components:
- ProviderConfig: immutable connection details for one provider
- ProviderRegistry: read-only collection of ProviderConfig
- load_provider_registry: builds the registry from Settings
- select_active_provider: fixed-preference selection of the enabled provider
"""

from mail_categorizer.providers.registry import (
    PREFERENCE_ORDER,
    ProviderConfig,
    ProviderRegistry,
    load_provider_registry,
    select_active_provider,
)

__all__ = [
    "PREFERENCE_ORDER",
    "ProviderConfig",
    "ProviderRegistry",
    "load_provider_registry",
    "select_active_provider",
]
