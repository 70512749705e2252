"""
FastAPI router for the promotion bounded context.

All routes delegate to PromotionService. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers; routes only
attach the operation-level message to unexpected failures.
"""

from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Depends, Response, status

from promotion_tracking.application.promotion.dtos import (
    CreatePromotionCommand,
    PromotionResult,
    UpdatePromotionCommand,
)
from promotion_tracking.application.promotion.service import PromotionService
from promotion_tracking.domain.promotion.errors import (
    PromotionDomainError,
    PromotionOperationError,
)
from promotion_tracking.interfaces.promotion.dependencies import get_promotion_service
from promotion_tracking.interfaces.promotion.schemas import (
    CreatePromotionRequest,
    ErrorResponse,
    PromotionResponse,
    UpdatePromotionRequest,
)

router = APIRouter(prefix="/promotions", tags=["promotions"])


@contextmanager
def _failure_message(message: str, include_cause: bool = False) -> Iterator[None]:
    """Re-raise any non-domain error as PromotionOperationError(message).

    Domain errors pass through so their own kind decides the status.
    """
    try:
        yield
    except PromotionDomainError:
        raise
    except Exception as exc:
        detail = f"{message}: {exc}" if include_cause else message
        raise PromotionOperationError(detail) from exc


def _to_response(result: PromotionResult) -> PromotionResponse:
    return PromotionResponse(
        id=result.id,
        promotion_id=result.promotion_id,
        name=result.name,
        product_name=result.product_name,
        discount_percentage=result.discount_percentage,
        start_date=result.start_date,
        end_date=result.end_date,
        created_at=result.created_at,
    )


@router.post(
    "",
    response_model=PromotionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create a promotion",
)
def create_promotion(
    request: CreatePromotionRequest,
    service: PromotionService = Depends(get_promotion_service),
) -> PromotionResponse:
    """Create a promotion with a client-supplied promotion ID."""
    command = CreatePromotionCommand(
        promotion_id=request.promotion_id,
        name=request.name,
        product_name=request.product_name,
        discount_percentage=request.discount_percentage,
        start_date=request.start_date,
        end_date=request.end_date,
    )
    with _failure_message("Failed to create promotion"):
        result = service.create_promotion(command)
    return _to_response(result)


@router.get(
    "",
    response_model=list[PromotionResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List promotions",
)
def get_all_promotions(
    service: PromotionService = Depends(get_promotion_service),
) -> list[PromotionResponse]:
    """Return every promotion."""
    with _failure_message("Failed to retrieve promotions", include_cause=True):
        results = service.get_all_promotions()
    return [_to_response(r) for r in results]


@router.get(
    "/{promotion_id}",
    response_model=PromotionResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a promotion",
)
def get_promotion(
    promotion_id: str,
    service: PromotionService = Depends(get_promotion_service),
) -> PromotionResponse:
    """Return the promotion with this promotion ID."""
    with _failure_message("Failed to get promotion"):
        result = service.get_promotion_by_promotion_id(promotion_id)
    return _to_response(result)


@router.put(
    "/{promotion_id}",
    response_model=PromotionResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update a promotion",
    description="Partial update: fields omitted from the body keep their stored values.",
)
def update_promotion(
    promotion_id: str,
    request: UpdatePromotionRequest,
    service: PromotionService = Depends(get_promotion_service),
) -> PromotionResponse:
    """Merge the request body onto the stored promotion."""
    command = UpdatePromotionCommand(
        promotion_id=promotion_id,
        changes=request.model_dump(exclude_unset=True),
    )
    with _failure_message("Failed to update promotion"):
        result = service.update_promotion_by_promotion_id(command)
    return _to_response(result)


@router.delete(
    "/{promotion_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete a promotion",
)
def delete_promotion(
    promotion_id: str,
    service: PromotionService = Depends(get_promotion_service),
) -> Response:
    """Permanently delete the promotion with this promotion ID."""
    with _failure_message("Failed to delete promotion"):
        service.delete_promotion_by_promotion_id(promotion_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
