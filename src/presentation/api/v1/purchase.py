"""Purchase evaluation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import PurchaseEvaluationRequest
from src.application.services import PurchaseApprovalService
from src.core.dependencies import get_purchase_service
from src.core.metrics import record_decision, track_decision_latency
from src.presentation.schemas import (
    ErrorResponseSchema,
    PurchaseDetailsSchema,
    PurchaseRequestSchema,
    PurchaseResponseSchema,
)

purchase_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        503: {"model": ErrorResponseSchema, "description": "Profile store unavailable"},
    },
)


@purchase_router.post(
    "/evaluate-purchase",
    response_model=PurchaseResponseSchema,
    status_code=200,
    summary="Evaluate Purchase",
    description="""Decide whether a purchase financing offer can be approved,
    or compute the best alternative offer for the customer""",
    responses={
        200: {"description": "Purchase evaluated (approved or denied)"},
    },
)
async def evaluate_purchase(
    request: PurchaseRequestSchema,
    purchase_service: Annotated[PurchaseApprovalService, Depends(get_purchase_service)],
) -> PurchaseResponseSchema:
    """
    Evaluate a purchase request.

    Denials are regular responses with approved=false and a message
    naming the reason.
    """
    dto = PurchaseEvaluationRequest(
        customer_id=request.customer_id,
        amount=request.details.amount,
        period=request.details.period,
    )

    with track_decision_latency():
        response = await purchase_service.evaluate(dto)

    record_decision(
        approved=response.approved,
        reason=response.reason,
        amount=response.details.amount if response.details else None,
        period=response.details.period if response.details else None,
    )

    return PurchaseResponseSchema(
        approved=response.approved,
        details=PurchaseDetailsSchema(
            amount=response.details.amount,
            period=response.details.period,
        ) if response.details else None,
        message=response.message,
    )
