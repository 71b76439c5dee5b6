"""Cart aggregation for room-service orders"""

import uuid
import logging
from decimal import Decimal
from typing import Optional

from ..core.errors import EmptyCartError, ItemUnavailableError, MissingDestinationError
from ..models.cart import CartLine, OrderDetails, OrderLine, OrderSubmission
from ..models.catalog import CatalogItem

logger = logging.getLogger(__name__)


class CartAggregator:
    """
    Quantity-keyed cart of catalog items.

    Lines keep first-insertion order; adding an item that is already in
    the cart bumps its quantity in place. A line never has quantity < 1
    and no item id appears twice.
    """

    def __init__(self, cart_id: Optional[str] = None):
        self.cart_id = cart_id or str(uuid.uuid4())
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> list[CartLine]:
        """Copy of the cart lines in display order"""
        return [line.model_copy() for line in self._lines]

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def item_count(self) -> int:
        """Total number of units across all lines"""
        return sum(line.quantity for line in self._lines)

    def _find(self, item_id: str) -> Optional[CartLine]:
        return next((line for line in self._lines if line.item_id == item_id), None)

    def get_line(self, item_id: str) -> Optional[CartLine]:
        line = self._find(item_id)
        return line.model_copy() if line else None

    def add(self, item: CatalogItem) -> CartLine:
        """Add one unit of an item"""
        if not item.is_available:
            raise ItemUnavailableError(item.id, item.name)

        existing_line = self._find(item.id)
        if existing_line:
            existing_line.quantity += 1
            return existing_line.model_copy()

        line = CartLine(
            item_id=item.id,
            name=item.name,
            quantity=1,
            unit_price=item.price,
        )
        self._lines.append(line)
        return line.model_copy()

    def remove(self, item_id: str) -> None:
        """Remove one unit of an item; unknown ids are ignored"""
        line = self._find(item_id)
        if not line:
            return

        if line.quantity > 1:
            line.quantity -= 1
        else:
            self._lines = [i for i in self._lines if i.item_id != item_id]

    def total(self) -> Decimal:
        return sum((line.line_total for line in self._lines), Decimal("0"))

    def to_submission(self, extra: OrderDetails) -> OrderSubmission:
        """
        Snapshot the cart as an order.

        The cart is left untouched; clear it once the backend has
        accepted the order.
        """
        if not self._lines:
            raise EmptyCartError()

        destination = extra.destination.strip()
        if not destination:
            raise MissingDestinationError()

        return OrderSubmission(
            lines=tuple(
                OrderLine(
                    item_id=line.item_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for line in self._lines
            ),
            total=self.total(),
            destination=destination,
            special_instructions=extra.special_instructions.strip(),
        )

    def clear(self) -> None:
        self._lines = []


class CartStore:
    """In-memory carts keyed by cart id"""

    def __init__(self):
        self.carts: dict[str, CartAggregator] = {}

    def create_cart(self) -> CartAggregator:
        cart = CartAggregator()
        self.carts[cart.cart_id] = cart
        logger.debug(f"Created cart {cart.cart_id}")
        return cart

    def get_cart(self, cart_id: str) -> Optional[CartAggregator]:
        return self.carts.get(cart_id)

    def get_or_create_cart(self, cart_id: Optional[str] = None) -> CartAggregator:
        """Get existing cart or create new one"""
        if cart_id and cart_id in self.carts:
            return self.carts[cart_id]
        return self.create_cart()

    def delete_cart(self, cart_id: str) -> bool:
        if cart_id in self.carts:
            del self.carts[cart_id]
            return True
        return False


# Singleton instance
cart_store = CartStore()
