"""
Dependency injection for the promotion bounded context.

Provides FastAPI dependency functions that wire the repository adapter
into the application service via constructor injection.
"""

from fastapi import Depends
from sqlalchemy.engine import Engine

from promotion_tracking.application.promotion.service import PromotionService
from promotion_tracking.domain.promotion.ports import PromotionRepository
from promotion_tracking.infrastructure.promotion.repository import (
    PromotionRepositoryAdapter,
)
from promotion_tracking.interfaces.dependencies import get_engine


def get_promotion_repository(
    engine: Engine = Depends(get_engine),
) -> PromotionRepository:
    """Build the promotion repository on the shared engine."""
    return PromotionRepositoryAdapter(engine=engine)


def get_promotion_service(
    repository: PromotionRepository = Depends(get_promotion_repository),
) -> PromotionService:
    """Build PromotionService with its infrastructure dependencies."""
    return PromotionService(repository=repository)
