"""
Provider dispatch and prompt construction.

Components:
- BaseWireClient: Abstract base for wire-format clients
- OpenAICompatibleClient / AnthropicClient / OllamaClient: one per WireFormat
- Dispatcher: Routes a prompt to the provider's wire-format client
- PromptBuilder: Renders the categorization prompt from an Email
- ProviderError: The single failure kind surfaced by dispatch
"""

from mail_categorizer.llm.anthropic_client import AnthropicClient
from mail_categorizer.llm.base_client import BaseWireClient
from mail_categorizer.llm.dispatcher import WIRE_CLIENTS, Dispatcher
from mail_categorizer.llm.exceptions import ProviderError
from mail_categorizer.llm.ollama_client import OllamaClient
from mail_categorizer.llm.openai_client import OpenAICompatibleClient
from mail_categorizer.llm.prompt_builder import PromptBuilder

__all__ = [
    "AnthropicClient",
    "BaseWireClient",
    "Dispatcher",
    "OllamaClient",
    "OpenAICompatibleClient",
    "PromptBuilder",
    "ProviderError",
    "WIRE_CLIENTS",
]
