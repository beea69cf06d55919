"""
Review Handler Module

This module defines the FastAPI endpoint that relays code to the AI
reviewer and returns its markdown unchanged.

Design Decisions:
- Respond with text/plain so the body is exactly what the model wrote
- Resolve the engine through a dependency so it can be swapped in tests
- Map vendor failures to 502, leaving 500 for genuine server bugs
"""

from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from revu.logging_config import get_logger
from revu.models import ReviewRequest
from revu.services.ai_engine import AIReviewError, ReviewEngine, get_review_engine

logger = get_logger(__name__)

router = APIRouter(prefix="/ai", tags=["review"])


@router.post("/get-review", response_class=PlainTextResponse)
async def get_review(
    payload: ReviewRequest,
    engine: ReviewEngine = Depends(get_review_engine)
) -> PlainTextResponse:
    """
    Review a code snippet.

    Args:
        payload: Request body carrying the code
        engine: Review engine used to reach the AI vendor

    Returns:
        The review as plain (markdown) text

    Raises:
        HTTPException: 400 on empty code, 502 when the vendor fails
    """
    if not payload.code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Code is required"
        )

    logger.info("Review requested", code_length=len(payload.code))

    try:
        review = await engine.generate_review(payload.code)
    except AIReviewError as e:
        logger.error("Review generation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate review"
        )

    return PlainTextResponse(review)


@router.get("/health")
async def review_health() -> Dict[str, str]:
    """Health check endpoint for the review service."""
    return {"status": "healthy", "service": "review"}
