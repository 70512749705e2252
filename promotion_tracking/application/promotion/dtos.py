"""
Data Transfer Objects for the promotion application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class CreatePromotionCommand:
    """Input DTO for creating a promotion.

    Attributes:
        promotion_id: Client-supplied unique identifier.
        name: Display name of the promotion.
        product_name: Optional product the promotion applies to.
        discount_percentage: Optional discount, 0-100.
        start_date: Optional first day of the promotion.
        end_date: Optional last day of the promotion.
    """

    promotion_id: str
    name: str
    product_name: Optional[str] = None
    discount_percentage: Optional[Decimal] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass(frozen=True)
class UpdatePromotionCommand:
    """Input DTO for a partial update.

    Attributes:
        promotion_id: Identifier of the promotion to update.
        changes: Field name to new value, only for fields the client sent.
    """

    promotion_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PromotionResult:
    """Output DTO for a stored promotion."""

    id: Optional[int]
    promotion_id: str
    name: str
    product_name: Optional[str]
    discount_percentage: Optional[Decimal]
    start_date: Optional[date]
    end_date: Optional[date]
    created_at: Optional[datetime]
