"""Order endpoints for REST API."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from core.application.dtos.order_dto import CreateOrderRequest, ErrorResponse, OrderResponse
from core.application.services.order_service import OrderApplicationService

from apps.api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_order(
    request: CreateOrderRequest,
    http_request: Request,
    response: Response,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderResponse:
    """Create a new order.

    Domain failures propagate to the global handlers (400).

    Args:
        request: CreateOrderRequest DTO
        service: OrderApplicationService instance

    Returns:
        OrderResponse with created order details
    """
    order = await service.create_order(request)
    response.headers["Location"] = str(
        http_request.url_for("get_order", order_number=order.order_number)
    )
    logger.info(f"Order {order.order_number} created via API")
    return order


@router.get(
    "/{order_number}",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_order(
    order_number: str,
    request: Request,
    service: OrderApplicationService = Depends(get_order_service),
):
    """Get order by order number.

    Returns:
        OrderResponse with order details, or a 404 ErrorResponse
    """
    order = await service.get_order(order_number)
    if order is None:
        body = ErrorResponse(
            title="Order not found",
            message=f"Order {order_number} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            trace_id=getattr(request.state, "correlation_id", None),
            request_path=request.url.path,
            request_method=request.method,
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=body.model_dump(mode="json", by_alias=True),
        )
    return order
