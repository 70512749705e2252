"""
Adapter: Promotion repository.

Implements the PromotionRepository port on top of a SQLAlchemy engine.
Reads/writes the promotions table. Works against PostgreSQL in
production and SQLite in tests.
"""

import logging
from typing import Any, Mapping

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from promotion_tracking.domain.promotion.entities import Promotion, PromotionPatch
from promotion_tracking.domain.promotion.ports import (
    PromotionRepository,
    RecordNotFoundError,
)
from promotion_tracking.infrastructure.promotion.tables import promotions

logger = logging.getLogger(__name__)


def _row_to_promotion(row: Mapping[str, Any]) -> Promotion:
    """Map a promotions row to the domain entity."""
    return Promotion(
        id=row["id"],
        promotion_id=row["promotion_id"],
        name=row["name"],
        product_name=row["product_name"],
        discount_percentage=row["discount_percentage"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        created_at=row["created_at"],
    )


def _promotion_to_values(promotion: Promotion) -> dict[str, Any]:
    """Column values for insert/update. Store-assigned columns are left out."""
    return {
        "promotion_id": promotion.promotion_id,
        "name": promotion.name,
        "product_name": promotion.product_name,
        "discount_percentage": promotion.discount_percentage,
        "start_date": promotion.start_date,
        "end_date": promotion.end_date,
    }


class PromotionRepositoryAdapter(PromotionRepository):
    """SQLAlchemy adapter for the promotions table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_promotion(self, promotion: Promotion) -> Promotion:
        """Insert a promotion and read it back with its store-assigned fields."""
        with self._engine.begin() as conn:
            conn.execute(insert(promotions).values(**_promotion_to_values(promotion)))
            row = (
                conn.execute(
                    select(promotions).where(
                        promotions.c.promotion_id == promotion.promotion_id
                    )
                )
                .mappings()
                .one()
            )
        logger.debug(
            "Inserted promotion: promotion_id=%s id=%s", row["promotion_id"], row["id"]
        )
        return _row_to_promotion(row)

    def get_all_promotions(self) -> list[Promotion]:
        """Return every promotion in insertion order."""
        with self._engine.connect() as conn:
            rows = conn.execute(select(promotions).order_by(promotions.c.id)).mappings().all()
        return [_row_to_promotion(r) for r in rows]

    def get_promotion_by_promotion_id(self, promotion_id: str) -> Promotion:
        """Return the promotion with this ID or raise RecordNotFoundError."""
        query = select(promotions).where(promotions.c.promotion_id == promotion_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().one_or_none()

        if row is None:
            raise RecordNotFoundError(promotion_id)
        return _row_to_promotion(row)

    def update_promotion_by_promotion_id(
        self, promotion_id: str, patch: PromotionPatch
    ) -> Promotion:
        """Lock the row, merge the patch and write the full record back.

        The row lock is taken with SELECT ... FOR UPDATE where the backend
        supports it (SQLite serializes writers anyway).
        """
        query = (
            select(promotions)
            .where(promotions.c.promotion_id == promotion_id)
            .with_for_update()
        )
        with self._engine.begin() as conn:
            row = conn.execute(query).mappings().one_or_none()
            if row is None:
                raise RecordNotFoundError(promotion_id)

            merged = patch.apply(_row_to_promotion(row))
            conn.execute(
                update(promotions)
                .where(promotions.c.id == merged.id)
                .values(**_promotion_to_values(merged))
            )
            stored = (
                conn.execute(select(promotions).where(promotions.c.id == merged.id))
                .mappings()
                .one()
            )
        logger.debug(
            "Updated promotion: promotion_id=%s fields=%s",
            promotion_id,
            sorted(patch.changes),
        )
        return _row_to_promotion(stored)

    def delete_promotion_by_promotion_id(self, promotion_id: str) -> None:
        """Delete the promotion with this ID or raise RecordNotFoundError."""
        with self._engine.begin() as conn:
            deleted = conn.execute(
                delete(promotions).where(promotions.c.promotion_id == promotion_id)
            ).rowcount
        if deleted == 0:
            raise RecordNotFoundError(promotion_id)
        logger.debug("Deleted promotion: promotion_id=%s", promotion_id)
