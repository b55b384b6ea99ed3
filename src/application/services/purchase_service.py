"""Purchase approval service - orchestrates the purchase evaluation use case."""

import structlog

from src.application.dto import PurchaseEvaluationRequest, PurchaseEvaluationResponse
from src.core.metrics import record_profile_lookup, track_profile_lookup_latency
from src.domain.exceptions import (
    InvalidPurchaseRequestException,
    ProfileStoreUnavailableException,
)
from src.domain.interfaces import CustomerProfileRepository
from src.service.approval import (
    ApprovalSettings,
    ProfileFound,
    ProfileLookup,
    approval_settings,
    evaluate_purchase_async,
)

logger = structlog.get_logger(__name__)


class PurchaseApprovalService:
    """
    Application service for purchase approval use cases.
    """

    def __init__(
        self,
        profile_repository: CustomerProfileRepository,
        settings: ApprovalSettings = approval_settings,
    ):
        self._profile_repo = profile_repository
        self._settings = settings

    async def evaluate(self, request: PurchaseEvaluationRequest) -> PurchaseEvaluationResponse:
        """
        Evaluate a purchase request for a customer.

        The range policy runs before the profile lookup, so a rejected
        request never touches the profile store.

        Args:
            request: Customer id plus requested amount and period

        Returns:
            PurchaseEvaluationResponse with the verdict and offer terms

        Raises:
            InvalidPurchaseRequestException: If request validation fails
            ProfileStoreUnavailableException: If the profile store fails
        """
        errors = request.validate()
        if errors:
            raise InvalidPurchaseRequestException("; ".join(errors))

        purchase = request.to_entity()

        log = logger.bind(
            customer_id=purchase.customer_id,
            amount_requested=request.amount,
            period_requested=request.period,
            range_policy=self._settings.range_policy.value,
        )
        log.info("purchase_evaluation_requested")

        response = await evaluate_purchase_async(
            purchase, self._lookup_profile, self._settings
        )

        log.info(
            "purchase_evaluated",
            approved=response.approved,
            reason=response.reason.value,
            amount_offered=response.details.amount if response.details else None,
            period_offered=response.details.period if response.details else None,
        )

        return PurchaseEvaluationResponse.from_entity(response)

    async def _lookup_profile(self, customer_id: str) -> ProfileLookup:
        """Fetch the profile and record lookup metrics."""
        try:
            with track_profile_lookup_latency():
                lookup = await self._profile_repo.get_by_customer_id(customer_id)
        except ProfileStoreUnavailableException as e:
            record_profile_lookup("error")
            logger.warning(
                "profile_lookup_failed",
                customer_id=customer_id,
                error=e.message,
            )
            raise

        record_profile_lookup("found" if isinstance(lookup, ProfileFound) else "not_found")
        return lookup
