"""
API routes for email categorization.

POST /categorize always answers 200 with a complete result for a valid
request body: AI failures are absorbed by the rule-based fallback.
"""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, status

from mail_categorizer.api.dependencies import get_categorizer, get_settings
from mail_categorizer.api.models import (
    BatchCategorizeRequest,
    BatchCategorizeResponse,
    CategorizeRequest,
    HealthResponse,
)
from mail_categorizer.categorizer import Categorizer
from mail_categorizer.config import Settings
from mail_categorizer.models.results import CategorizationResult, ProviderStatus

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/categorize",
    response_model=CategorizationResult,
    status_code=status.HTTP_200_OK,
    summary="Categorize a single email",
    description="""
    Classify an email into Interested, MeetingBooked, NotInterested, Spam or
    OutOfOffice and return reply suggestions.

    Uses the active AI provider when one is configured and falls back to
    keyword rules otherwise or on any provider failure.
    """,
)
async def categorize_email(
    request: CategorizeRequest,
    categorizer: Categorizer = Depends(get_categorizer),
) -> CategorizationResult:
    email = request.to_email()
    result = await categorizer.categorize_email(email)

    logger.info(
        "Email categorized",
        category=result.category.value,
        replies_count=len(result.replies),
    )
    return result


@router.post(
    "/categorize/batch",
    response_model=BatchCategorizeResponse,
    status_code=status.HTTP_200_OK,
    summary="Categorize several emails",
)
async def categorize_batch(
    request: BatchCategorizeRequest,
    categorizer: Categorizer = Depends(get_categorizer),
) -> BatchCategorizeResponse:
    results = await categorizer.categorize_batch([item.to_email() for item in request.emails])
    return BatchCategorizeResponse(results=results, count=len(results))


@router.get(
    "/providers/status",
    response_model=ProviderStatus,
    summary="AI provider status",
    description="Active provider and each provider's enabled flag and model. Credentials are never returned.",
)
async def provider_status(
    categorizer: Categorizer = Depends(get_categorizer),
) -> ProviderStatus:
    return categorizer.provider_status()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    categorizer: Categorizer = Depends(get_categorizer),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Report categorization status.

    ``fallback`` means no provider is configured and rules are in use; the
    service is still fully functional, so overall status stays healthy.
    """
    categorization = "healthy" if categorizer.active_provider is not None else "fallback"
    services = {"categorization": categorization}

    logger.info("Health check", services=services)

    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        services=services,
        timestamp=datetime.now(timezone.utc),
    )
