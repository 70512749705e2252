"""
Port interfaces (ABCs) for the promotion bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from promotion_tracking.domain.promotion.entities import Promotion, PromotionPatch


class RecordNotFoundError(LookupError):
    """Sentinel raised by repository adapters when no row matches a key.

    Only the application layer translates it into a domain error.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"record not found: {key}")
        self.key = key


class PromotionRepository(ABC):
    """Port for persisting and retrieving promotions.

    Each method performs a single storage operation. Storage failures
    propagate unchanged, except that a missing record is always signalled
    with RecordNotFoundError.
    """

    @abstractmethod
    def create_promotion(self, promotion: Promotion) -> Promotion:
        """Persist a new promotion and return it with store-assigned fields."""
        raise NotImplementedError

    @abstractmethod
    def get_all_promotions(self) -> list[Promotion]:
        """Return every stored promotion, or an empty list."""
        raise NotImplementedError

    @abstractmethod
    def get_promotion_by_promotion_id(self, promotion_id: str) -> Promotion:
        """Return the promotion with the given ID.

        Raises:
            RecordNotFoundError: If no promotion has this ID.
        """
        raise NotImplementedError

    @abstractmethod
    def update_promotion_by_promotion_id(
        self, promotion_id: str, patch: PromotionPatch
    ) -> Promotion:
        """Merge ``patch`` onto the stored promotion and write it back.

        The read and the write happen in one transaction.

        Raises:
            RecordNotFoundError: If no promotion has this ID.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_promotion_by_promotion_id(self, promotion_id: str) -> None:
        """Permanently remove the promotion with the given ID.

        Raises:
            RecordNotFoundError: If no promotion has this ID.
        """
        raise NotImplementedError
