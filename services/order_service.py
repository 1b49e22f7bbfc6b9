from decimal import Decimal
from typing import Any, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from domain.identifiers import normalize_id
from domain.models import Order
from domain.schemas.auth_schemas import SessionUser
from repositories import MealRepository, OrderRepository, UserRepository
from app.exceptions import (
    DuplicateOrderError,
    InvalidSelectionError,
    ItemsUnavailableError,
    ServiceValidationError,
    StorageUnavailableError,
    UnauthorizedError,
)

logger = logging.getLogger("foodorder.orders")

CENTS = Decimal("0.01")


class OrderService:
    """Order placement and order history"""

    @staticmethod
    def validate_meal_ids(raw_ids: Any, strict: bool = False) -> List[str]:
        """
        Turn a client-supplied list of meal identifiers into a working set.

        Malformed identifiers are dropped (or rejected when ``strict`` is set)
        and repeated identifiers collapse to their first occurrence.

        Raises:
            InvalidSelectionError: If the selection is missing, not a list, or
                has no usable identifier
        """
        # A bare string is iterable but is not a selection
        if not isinstance(raw_ids, (list, tuple)) or not raw_ids:
            raise InvalidSelectionError("Please select at least one meal")

        valid: List[str] = []
        seen = set()
        for raw in raw_ids:
            meal_id = normalize_id(raw)
            if meal_id is None:
                if strict:
                    raise InvalidSelectionError(
                        "Invalid meal selection", details={"meal_id": str(raw)}
                    )
                logger.warning(f"Invalid meal ID dropped: {raw!r}")
                continue
            if meal_id not in seen:
                seen.add(meal_id)
                valid.append(meal_id)

        if not valid:
            raise InvalidSelectionError("Invalid meal selection")
        return valid

    @staticmethod
    def place_order(
        db: Session,
        principal: Optional[SessionUser],
        meal_ids: Any,
        client_reference: Any = None,
        strict_ids: bool = False,
    ) -> Order:
        """
        Validate a cart of meal identifiers, price it and record the order.

        This method:
        1. Requires an authenticated principal that still exists
        2. Validates identifiers (drops malformed ones unless strict_ids)
        3. Checks every remaining identifier resolves to a meal
        4. Prices the order from stored meal prices
        5. Writes the order and its line items in one transaction

        Args:
            db: Database session
            principal: Identity from the session token, or None
            meal_ids: Client-supplied meal identifiers
            client_reference: Optional caller token; unique per user
            strict_ids: Reject malformed identifiers instead of dropping them

        Returns:
            Order: The created order with items and meals loaded

        Raises:
            UnauthorizedError: No session, or the session's user is gone
            InvalidSelectionError: Empty, non-list or entirely malformed selection
            ServiceValidationError: client_reference is not a 1-64 character string
            ItemsUnavailableError: Some identifiers do not match a meal
            DuplicateOrderError: The store reported a uniqueness conflict
            StorageUnavailableError: Any other database failure
        """
        if principal is None:
            raise UnauthorizedError("Please log in to place an order")

        valid_ids = OrderService.validate_meal_ids(meal_ids, strict=strict_ids)
        if client_reference is not None and not (
            isinstance(client_reference, str) and 0 < len(client_reference) <= 64
        ):
            raise ServiceValidationError(
                "client_reference must be a string of 1 to 64 characters",
                code="INVALID_CLIENT_REFERENCE",
            )

        try:
            if UserRepository(db).get_by_id(principal.user_id) is None:
                logger.warning(f"order_rejected reason=unknown_user user_id={principal.user_id}")
                raise UnauthorizedError("Please log in to place an order")

            found = {m.meal_id: m for m in MealRepository(db).get_by_ids(valid_ids)}
        except SQLAlchemyError:
            logger.exception(f"Order placement lookup failed user_id={principal.user_id}")
            raise StorageUnavailableError()

        if len(found) < len(valid_ids):
            missing = [mid for mid in valid_ids if mid not in found]
            logger.warning(
                f"order_rejected reason=items_unavailable user_id={principal.user_id} "
                f"missing={missing}"
            )
            raise ItemsUnavailableError(details={"missing_meal_ids": missing})

        meals = [found[mid] for mid in valid_ids]
        total_price = sum((Decimal(m.price) for m in meals), Decimal("0")).quantize(CENTS)

        order_repo = OrderRepository(db)
        try:
            order = order_repo.create_with_items(
                user_id=principal.user_id,
                meals=meals,
                total_price=total_price,
                client_reference=client_reference,
            )
        except IntegrityError as e:
            logger.error(
                f"Order placement conflict user_id={principal.user_id} "
                f"client_reference={client_reference}: {e.orig}"
            )
            raise DuplicateOrderError()
        except SQLAlchemyError:
            logger.exception(f"Order placement failed user_id={principal.user_id}")
            raise StorageUnavailableError()

        logger.info(
            f"order_placed order_id={order.order_id} user_id={principal.user_id} "
            f"items={len(meals)} total={total_price}"
        )
        return order

    @staticmethod
    def list_orders(db: Session, principal: Optional[SessionUser]) -> List[Order]:
        """
        Return every order of the session's user, newest first, with line
        items resolved to meals.

        Raises:
            UnauthorizedError: No session
            StorageUnavailableError: If the database cannot be queried
        """
        if principal is None:
            raise UnauthorizedError("Please log in to view your orders")

        try:
            orders = OrderRepository(db).get_by_user_id(principal.user_id)
        except SQLAlchemyError:
            logger.exception(f"Order history fetch failed user_id={principal.user_id}")
            raise StorageUnavailableError()

        logger.info(f"orders_listed user_id={principal.user_id} count={len(orders)}")
        return orders
