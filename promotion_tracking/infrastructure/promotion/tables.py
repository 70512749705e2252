"""
Table definitions for the promotion bounded context.

Registered on the shared metadata so create_schema() picks them up.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    Table,
    UniqueConstraint,
    func,
)

from promotion_tracking.infrastructure.database import metadata

DISCOUNT_PRECISION = 5
DISCOUNT_SCALE = 2

promotions = Table(
    "promotions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("promotion_id", String(64), nullable=False),
    Column("name", String(255), nullable=False),
    Column("product_name", String(255)),
    Column("discount_percentage", Numeric(DISCOUNT_PRECISION, DISCOUNT_SCALE)),
    Column("start_date", Date),
    Column("end_date", Date),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    UniqueConstraint("promotion_id", name="uix_promotions_promotion_id"),
)
