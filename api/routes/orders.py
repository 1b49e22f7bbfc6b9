"""Order placement and order history routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List, Optional

from api.dependencies import get_current_session, get_db, get_settings
from api.responses import error_responses
from app.config import Settings
from domain.mappers import OrderMapper
from domain.schemas.auth_schemas import SessionUser
from domain.schemas.order_schemas import OrderResponse, PlaceOrderRequest
from services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger("foodorder.api.orders")


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 401, 404, 409, 500),
)
def place_order(
    payload: Optional[PlaceOrderRequest] = None,
    session: Optional[SessionUser] = Depends(get_current_session),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
):
    """
    Place an order for the selected meals.

    The total is computed from stored meal prices. Pass a ``client_reference``
    to make resubmission safe: a second order with the same reference is
    rejected with 409.
    """
    payload = payload or PlaceOrderRequest()
    order = OrderService.place_order(
        db,
        session,
        payload.meal_ids,
        client_reference=payload.client_reference,
        strict_ids=settings.strict_meal_ids,
    )
    return OrderMapper.to_response(order)


@router.get("", response_model=List[OrderResponse], responses=error_responses(401, 500))
def list_orders(
    session: Optional[SessionUser] = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    """List the caller's orders, newest first, with their meals."""
    orders = OrderService.list_orders(db, session)
    return [OrderMapper.to_response(o) for o in orders]
