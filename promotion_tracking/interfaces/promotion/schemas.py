"""
Pydantic schemas for promotion API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

PROMOTION_ID_MAX_LEN = 64
NAME_MAX_LEN = 255
DISCOUNT_MAX_DIGITS = 5
DISCOUNT_PLACES = 2


class CreatePromotionRequest(BaseModel):
    """Request schema for creating a promotion.

    Attributes:
        promotion_id: Client-supplied unique identifier.
        name: Display name.
        product_name: Optional product the promotion applies to.
        discount_percentage: Optional discount between 0 and 100, at most two
            decimal places.
        start_date: Optional first day.
        end_date: Optional last day.
    """

    promotion_id: str = Field(
        ..., min_length=1, max_length=PROMOTION_ID_MAX_LEN, description="Unique promotion ID"
    )
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    product_name: Optional[str] = Field(default=None, max_length=NAME_MAX_LEN)
    discount_percentage: Optional[Decimal] = Field(
        default=None, ge=0, le=100, max_digits=DISCOUNT_MAX_DIGITS, decimal_places=DISCOUNT_PLACES
    )
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class UpdatePromotionRequest(BaseModel):
    """Request schema for a partial update.

    Every field is optional; only the fields present in the body are
    applied. ``name`` may be omitted but not set to null. Unknown fields,
    including ``promotion_id``, are ignored.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=NAME_MAX_LEN)
    product_name: Optional[str] = Field(default=None, max_length=NAME_MAX_LEN)
    discount_percentage: Optional[Decimal] = Field(
        default=None, ge=0, le=100, max_digits=DISCOUNT_MAX_DIGITS, decimal_places=DISCOUNT_PLACES
    )
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value


class PromotionResponse(BaseModel):
    """A stored promotion."""

    id: Optional[int]
    promotion_id: str
    name: str
    product_name: Optional[str]
    discount_percentage: Optional[Decimal]
    start_date: Optional[date]
    end_date: Optional[date]
    created_at: Optional[datetime]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response returned by the error handlers."""

    error: str
    detail: Optional[str] = None
