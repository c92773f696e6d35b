"""
Categorization orchestrator.

Two tiers, in order:
    1. AI: PromptBuilder -> Dispatcher -> ResponseParser, using the single
       active provider chosen at construction time.
    2. Rules: RuleBasedClassifier, used when no provider is enabled or when
       any step of the AI attempt raises.

There is no retry of the same provider and no cascade to a second one.
``categorize_email`` never raises; every caller gets a complete result.

Usage:
    registry = load_provider_registry(settings)
    categorizer = Categorizer(registry, Dispatcher(), PromptBuilder(),
                              ResponseParser(), RuleBasedClassifier())
    result = await categorizer.categorize_email(email)
"""

import asyncio
from typing import Optional, Sequence

import structlog

from mail_categorizer.llm.dispatcher import Dispatcher
from mail_categorizer.llm.prompt_builder import PromptBuilder
from mail_categorizer.models.email import Email
from mail_categorizer.models.enums import ProviderName
from mail_categorizer.models.results import (
    CategorizationResult,
    ProviderStatus,
    ProviderSummary,
)
from mail_categorizer.monitoring.metrics import (
    categorizations_total,
    provider_failures_total,
)
from mail_categorizer.providers.registry import (
    ProviderConfig,
    ProviderRegistry,
    select_active_provider,
)
from mail_categorizer.rules.classifier import RuleBasedClassifier
from mail_categorizer.validation.parser import ResponseParser


logger = structlog.get_logger(__name__)


class Categorizer:
    """
    Compose provider selection, the AI attempt and the rule-based fallback.

    Shared state is limited to the read-only registry and stateless
    collaborators, so concurrent ``categorize_email`` calls need no locking.

    Attributes:
        registry: Immutable provider registry
        dispatcher: Sends prompts to providers
        prompt_builder: Renders prompts from emails
        parser: Turns provider text into results
        classifier: Rule-based fallback
        active_provider: Provider selected at construction, or None
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        dispatcher: Dispatcher,
        prompt_builder: PromptBuilder,
        parser: ResponseParser,
        classifier: RuleBasedClassifier,
        batch_concurrency: int = 5,
    ):
        self.registry = registry
        self.dispatcher = dispatcher
        self.prompt_builder = prompt_builder
        self.parser = parser
        self.classifier = classifier
        self.batch_concurrency = max(1, batch_concurrency)

        self.active_provider: Optional[ProviderName] = select_active_provider(registry)

        if self.active_provider is None:
            logger.warning("No AI provider configured. Using rule-based categorization only.")
        else:
            provider = self.registry[self.active_provider]
            logger.info(
                "AI categorization initialized",
                provider=provider.name.value,
                model=provider.model,
                wire_format=provider.wire_format.value,
            )

    @property
    def provider(self) -> Optional[ProviderConfig]:
        if self.active_provider is None:
            return None
        return self.registry[self.active_provider]

    async def categorize_email(self, email: Email) -> CategorizationResult:
        """
        Categorize an email and suggest replies.

        Args:
            email: Email to categorize

        Returns:
            CategorizationResult; never raises
        """
        provider = self.provider
        if provider is None:
            return self._categorize_with_rules(email)

        try:
            result = await self._categorize_with_ai(provider, email)
        except Exception as e:
            logger.error(
                "AI categorization failed",
                provider=provider.name.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            provider_failures_total.labels(provider=provider.name.value).inc()
            logger.info("Falling back to rule-based categorization", provider=provider.name.value)
            return self._categorize_with_rules(email)

        categorizations_total.labels(source="ai", category=result.category.value).inc()
        return result

    async def categorize_batch(self, emails: Sequence[Email]) -> list[CategorizationResult]:
        """
        Categorize several emails concurrently.

        At most ``batch_concurrency`` provider requests are in flight at
        once. Results are returned in input order.
        """
        semaphore = asyncio.Semaphore(self.batch_concurrency)

        async def _one(email: Email) -> CategorizationResult:
            async with semaphore:
                return await self.categorize_email(email)

        results = await asyncio.gather(*(_one(email) for email in emails))

        logger.info(
            "Batch categorization completed",
            email_count=len(emails),
            concurrency=self.batch_concurrency,
        )
        return list(results)

    def provider_status(self) -> ProviderStatus:
        """Diagnostic view of the registry; credentials are never included."""
        return ProviderStatus(
            active_provider=self.active_provider,
            fallback_available=True,
            providers={
                provider.name.value: ProviderSummary(
                    enabled=provider.enabled,
                    model=provider.model,
                    wire_format=provider.wire_format,
                )
                for provider in self.registry
            },
        )

    async def _categorize_with_ai(
        self, provider: ProviderConfig, email: Email
    ) -> CategorizationResult:
        prompt = self.prompt_builder.build_prompt(email)
        raw_text = await self.dispatcher.dispatch(provider, prompt)
        return self.parser.parse(raw_text)

    def _categorize_with_rules(self, email: Email) -> CategorizationResult:
        result = self.classifier.classify(email)
        categorizations_total.labels(source="rules", category=result.category.value).inc()
        return result

    async def close(self):
        await self.dispatcher.close()
