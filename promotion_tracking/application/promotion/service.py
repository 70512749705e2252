"""
Application service: promotion CRUD.

Input: CreatePromotionCommand, UpdatePromotionCommand, promotion IDs.
Output: PromotionResult DTOs.
Side effects: Writes to the promotion repository.
Failure cases: PromotionNotFoundError, InvalidPromotionError. Storage
errors propagate unchanged.
"""

import logging

from promotion_tracking.application.promotion.dtos import (
    CreatePromotionCommand,
    PromotionResult,
    UpdatePromotionCommand,
)
from promotion_tracking.domain.promotion.entities import Promotion, PromotionPatch
from promotion_tracking.domain.promotion.errors import PromotionNotFoundError
from promotion_tracking.domain.promotion.ports import (
    PromotionRepository,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)


def _to_result(promotion: Promotion) -> PromotionResult:
    return PromotionResult(
        id=promotion.id,
        promotion_id=promotion.promotion_id,
        name=promotion.name,
        product_name=promotion.product_name,
        discount_percentage=promotion.discount_percentage,
        start_date=promotion.start_date,
        end_date=promotion.end_date,
        created_at=promotion.created_at,
    )


class PromotionService:
    """Orchestrates promotion persistence.

    Delegates every operation to the PromotionRepository port. The only
    logic here is translating the repository's RecordNotFoundError into
    PromotionNotFoundError; every other error passes through untouched.
    """

    def __init__(self, repository: PromotionRepository) -> None:
        self._repository = repository

    def create_promotion(self, command: CreatePromotionCommand) -> PromotionResult:
        """Persist a new promotion.

        Args:
            command: Fields of the promotion to create.

        Returns:
            The stored promotion, including store-assigned fields.
        """
        logger.info("Creating promotion promotion_id=%s", command.promotion_id)
        promotion = Promotion(
            promotion_id=command.promotion_id,
            name=command.name,
            product_name=command.product_name,
            discount_percentage=command.discount_percentage,
            start_date=command.start_date,
            end_date=command.end_date,
        )
        return _to_result(self._repository.create_promotion(promotion))

    def get_all_promotions(self) -> list[PromotionResult]:
        """Return every stored promotion."""
        promotions = self._repository.get_all_promotions()
        logger.info("Retrieved %d promotions", len(promotions))
        return [_to_result(p) for p in promotions]

    def get_promotion_by_promotion_id(self, promotion_id: str) -> PromotionResult:
        """Return a single promotion.

        Raises:
            PromotionNotFoundError: If no promotion has this ID.
        """
        logger.info("Retrieving promotion promotion_id=%s", promotion_id)
        try:
            promotion = self._repository.get_promotion_by_promotion_id(promotion_id)
        except RecordNotFoundError as exc:
            raise PromotionNotFoundError(promotion_id) from exc
        return _to_result(promotion)

    def update_promotion_by_promotion_id(
        self, command: UpdatePromotionCommand
    ) -> PromotionResult:
        """Apply a partial update to an existing promotion.

        Only the fields in ``command.changes`` are overwritten.

        Raises:
            InvalidPromotionError: If the changes name an immutable field
                or null out a required one.
            PromotionNotFoundError: If no promotion has this ID.
        """
        patch = PromotionPatch(command.changes)
        logger.info(
            "Updating promotion promotion_id=%s fields=%s",
            command.promotion_id,
            sorted(patch.changes),
        )
        try:
            promotion = self._repository.update_promotion_by_promotion_id(
                command.promotion_id, patch
            )
        except RecordNotFoundError as exc:
            raise PromotionNotFoundError(command.promotion_id) from exc
        return _to_result(promotion)

    def delete_promotion_by_promotion_id(self, promotion_id: str) -> None:
        """Permanently delete a promotion.

        Raises:
            PromotionNotFoundError: If no promotion has this ID.
        """
        logger.info("Deleting promotion promotion_id=%s", promotion_id)
        try:
            self._repository.delete_promotion_by_promotion_id(promotion_id)
        except RecordNotFoundError as exc:
            raise PromotionNotFoundError(promotion_id) from exc
