"""
Tests for Order Placement and Order History (OrderService).

This test suite covers:
- Placing an order from a cart of meal identifiers
  - Authorization before any validation or storage access
  - Dropping malformed identifiers (and the strict alternative)
  - Rejecting dangling meal references without writing anything
  - Pricing from stored meal prices
  - Atomic creation of the order and its line items
- Listing a user's orders, newest first, with meals resolved
"""

import pytest
from decimal import Decimal
from sqlalchemy.orm import Session

from test_fixtures import count_orders, make_meal, make_user, session_for, utc
from services.order_service import OrderService
from domain.enums import OrderStatus
from domain.identifiers import new_id
from domain.mappers import OrderMapper
from domain.models import OrderItem
from domain.schemas.auth_schemas import SessionUser
from app.exceptions import (
    DuplicateOrderError,
    InvalidSelectionError,
    ItemsUnavailableError,
    ServiceValidationError,
    UnauthorizedError,
)


# =============================================================================
# ORDER PLACEMENT FLOW
# =============================================================================

EXAMPLE_ORDER_FLOW = """
Order Placement Flow
======================================

Catalog: A = $10.00, B = $5.50

1. place_order(session, [A, B])            -> Order total 15.50, 2 line items
2. place_order(session, [A, "nonexistent"]) -> ItemsUnavailableError, no order
3. place_order(session, [])                -> InvalidSelectionError, no order
4. place_order(None, [A])                  -> UnauthorizedError, no order
"""


@pytest.fixture()
def catalog(db_session: Session):
    a = make_meal(db_session, name="Meal A", price="10.00")
    b = make_meal(db_session, name="Meal B", price="5.50")
    return a, b


@pytest.fixture()
def customer(db_session: Session):
    return make_user(db_session)


def test_place_order_prices_from_stored_meals(db_session, catalog, customer):
    """
    Verifies:
    - Total equals the exact sum of stored prices (10.00 + 5.50)
    - One line item per meal, each pointing at the right meal
    - Status defaults to PENDING and the order belongs to the caller
    """
    a, b = catalog

    order = OrderService.place_order(
        db_session, session_for(customer), [a.meal_id, b.meal_id]
    )

    assert order.total_price == Decimal("15.50")
    assert order.status == OrderStatus.PENDING
    assert order.user_id == customer.user_id
    assert [item.meal_id for item in order.items] == [a.meal_id, b.meal_id]
    assert [item.meal.name for item in order.items] == ["Meal A", "Meal B"]
    assert count_orders(db_session) == 1


def test_place_order_uses_current_price(db_session, catalog, customer):
    """A price change before ordering is reflected in the total."""
    a, _ = catalog
    a.price = Decimal("11.25")
    db_session.commit()

    order = OrderService.place_order(db_session, session_for(customer), [a.meal_id])

    assert order.total_price == Decimal("11.25")


def test_place_order_accepts_upper_case_ids(db_session, catalog, customer):
    a, _ = catalog

    order = OrderService.place_order(
        db_session, session_for(customer), [a.meal_id.upper()]
    )

    assert order.items[0].meal_id == a.meal_id


def test_place_order_collapses_repeated_ids(db_session, catalog, customer):
    """Repeated identifiers produce one line item per distinct meal."""
    a, b = catalog

    order = OrderService.place_order(
        db_session, session_for(customer), [a.meal_id, b.meal_id, a.meal_id]
    )

    assert len(order.items) == 2
    assert order.total_price == Decimal("15.50")


def test_place_order_drops_malformed_ids(db_session, catalog, customer):
    """
    Verifies:
    - Malformed identifiers are silently dropped from the working set
    - The order is placed for the remaining valid identifiers
    """
    a, _ = catalog

    order = OrderService.place_order(
        db_session, session_for(customer), ["not-an-id", a.meal_id, "1234"]
    )

    assert [item.meal_id for item in order.items] == [a.meal_id]
    assert order.total_price == Decimal("10.00")


def test_place_order_strict_rejects_any_malformed_id(db_session, catalog, customer):
    a, _ = catalog

    with pytest.raises(InvalidSelectionError):
        OrderService.place_order(
            db_session, session_for(customer), ["not-an-id", a.meal_id], strict_ids=True
        )

    assert count_orders(db_session) == 0


@pytest.mark.parametrize(
    "meal_ids",
    [
        [],
        None,
        ["not-an-id"],
        ["zz" * 16, "abc", ""],
        ["0" * 32 + "\n"],
        "abc",
        "0" * 32,
        {"meal_id": "0" * 32},
        42,
    ],
)
def test_place_order_invalid_selection(db_session, customer, meal_ids):
    """Empty, non-list and entirely malformed selections fail without creating an order."""
    with pytest.raises(InvalidSelectionError):
        OrderService.place_order(db_session, session_for(customer), meal_ids)

    assert count_orders(db_session) == 0


def test_place_order_items_unavailable_is_all_or_nothing(db_session, catalog, customer):
    """
    Verifies:
    - One existing and one unknown meal id fails with ItemsUnavailableError
    - The missing id is reported in the error details
    - No order (and no line item) is created
    """
    a, _ = catalog
    missing = new_id()

    with pytest.raises(ItemsUnavailableError) as exc_info:
        OrderService.place_order(db_session, session_for(customer), [a.meal_id, missing])

    assert exc_info.value.details == {"missing_meal_ids": [missing]}
    assert count_orders(db_session) == 0
    assert db_session.query(OrderItem).count() == 0


def test_place_order_unavailable_flag_does_not_block_ordering(db_session, customer):
    """Existence is what matters for placement; the catalog filter is display-only."""
    hidden = make_meal(db_session, name="Off Menu", price="7.00", is_available=False)

    order = OrderService.place_order(db_session, session_for(customer), [hidden.meal_id])

    assert order.total_price == Decimal("7.00")


@pytest.mark.parametrize("meal_ids", [[], ["not-an-id"], None, "abc", [1, 2]])
def test_place_order_requires_session_regardless_of_input(db_session, catalog, meal_ids):
    with pytest.raises(UnauthorizedError):
        OrderService.place_order(db_session, None, meal_ids)

    assert count_orders(db_session) == 0


def test_place_order_rejects_session_of_unknown_user(db_session, catalog):
    a, _ = catalog
    ghost = SessionUser(user_id=new_id(), email="ghost@example.com", name="Ghost")

    with pytest.raises(UnauthorizedError):
        OrderService.place_order(db_session, ghost, [a.meal_id])

    assert count_orders(db_session) == 0


def test_place_order_duplicate_client_reference(db_session, catalog, customer):
    """
    Verifies:
    - A second order with the same client_reference raises DuplicateOrderError
    - Only the first order is stored
    - The same reference is still usable by another user
    """
    a, b = catalog
    session = session_for(customer)

    OrderService.place_order(db_session, session, [a.meal_id], client_reference="cart-1")
    with pytest.raises(DuplicateOrderError):
        OrderService.place_order(db_session, session, [b.meal_id], client_reference="cart-1")

    assert count_orders(db_session) == 1

    other = make_user(db_session, full_name="Michael Chen")
    OrderService.place_order(
        db_session, session_for(other), [b.meal_id], client_reference="cart-1"
    )
    assert count_orders(db_session) == 2


def test_orders_without_reference_never_conflict(db_session, catalog, customer):
    a, _ = catalog
    session = session_for(customer)

    OrderService.place_order(db_session, session, [a.meal_id])
    OrderService.place_order(db_session, session, [a.meal_id])

    assert count_orders(db_session) == 2


# =============================================================================
# ORDER HISTORY
# =============================================================================


def test_list_orders_requires_session(db_session):
    with pytest.raises(UnauthorizedError):
        OrderService.list_orders(db_session, None)


def test_list_orders_empty_history(db_session, customer):
    assert OrderService.list_orders(db_session, session_for(customer)) == []


def test_list_orders_newest_first_with_meals(db_session, catalog, customer):
    """
    Verifies:
    - Orders come back in descending creation time
    - Each order's derived meal list matches its line items
    - A meal ordered twice appears in both orders
    """
    a, b = catalog
    session = session_for(customer)

    first = OrderService.place_order(db_session, session, [a.meal_id])
    second = OrderService.place_order(db_session, session, [a.meal_id, b.meal_id])

    first.created_at = utc(2024, 1, 1)
    second.created_at = utc(2024, 1, 2)
    db_session.commit()

    orders = OrderService.list_orders(db_session, session)

    assert [o.order_id for o in orders] == [second.order_id, first.order_id]

    responses = [OrderMapper.to_response(o) for o in orders]
    assert [m.name for m in responses[0].meals] == ["Meal A", "Meal B"]
    assert [m.name for m in responses[1].meals] == ["Meal A"]
    assert responses[0].total_price == 15.5


def test_list_orders_only_returns_own_orders(db_session, catalog, customer):
    a, _ = catalog
    other = make_user(db_session, full_name="Emma Johnson")

    OrderService.place_order(db_session, session_for(other), [a.meal_id])
    mine = OrderService.place_order(db_session, session_for(customer), [a.meal_id])

    orders = OrderService.list_orders(db_session, session_for(customer))

    assert [o.order_id for o in orders] == [mine.order_id]


# =============================================================================
# IDENTIFIER VALIDATION
# =============================================================================


def test_validate_meal_ids_keeps_first_occurrence_order():
    x, y = new_id(), new_id()

    assert OrderService.validate_meal_ids([y, "bad", x, y.upper()]) == [y, x]


def test_validate_meal_ids_ignores_non_strings():
    x = new_id()

    assert OrderService.validate_meal_ids([42, None, x]) == [x]


def test_validate_meal_ids_rejects_bare_string():
    """A single id sent as a string is not walked character by character."""
    with pytest.raises(InvalidSelectionError) as exc_info:
        OrderService.validate_meal_ids(new_id())

    assert exc_info.value.message == "Please select at least one meal"


@pytest.mark.parametrize("reference", ["", "x" * 65, 123, ["cart-1"]])
def test_place_order_rejects_bad_client_reference(db_session, catalog, customer, reference):
    a, _ = catalog

    with pytest.raises(ServiceValidationError) as exc_info:
        OrderService.place_order(
            db_session, session_for(customer), [a.meal_id], client_reference=reference
        )

    assert exc_info.value.code == "INVALID_CLIENT_REFERENCE"
    assert count_orders(db_session) == 0
