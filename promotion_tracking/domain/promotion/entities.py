"""
Domain entities for the promotion bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Optional

from promotion_tracking.domain.promotion.errors import InvalidPromotionError

MUTABLE_FIELDS = frozenset(
    {"name", "product_name", "discount_percentage", "start_date", "end_date"}
)
NON_NULLABLE_FIELDS = frozenset({"name"})


@dataclass(frozen=True)
class Promotion:
    """A tracked promotion, addressable only by its promotion ID.

    ``id`` and ``created_at`` are assigned by the store on insert and are
    None on a promotion that has not been persisted yet.
    """

    promotion_id: str
    name: str
    product_name: Optional[str] = None
    discount_percentage: Optional[Decimal] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PromotionPatch:
    """Partial update of a promotion.

    Maps field name to new value. Fields absent from ``changes`` keep their
    stored value; a field present with None clears it (where allowed).

    Raises:
        InvalidPromotionError: If a field is not mutable or a required
            field is set to None.
    """

    changes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = set(self.changes) - MUTABLE_FIELDS
        if unknown:
            raise InvalidPromotionError(
                f"Fields cannot be updated: {', '.join(sorted(unknown))}"
            )
        for name in NON_NULLABLE_FIELDS:
            if name in self.changes and self.changes[name] is None:
                raise InvalidPromotionError(f"Field cannot be null: {name}")
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))

    @property
    def is_empty(self) -> bool:
        return not self.changes

    def apply(self, promotion: Promotion) -> Promotion:
        """Return ``promotion`` with the patched fields overlaid."""
        return replace(promotion, **self.changes)
