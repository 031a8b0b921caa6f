"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, stock goes up and down, products are added to
and removed from the catalog.

Two variants exist, one per ``UnitKind``: ``PieceProduct`` counts whole
units, ``WeightProduct`` tracks kilograms.  All stock arithmetic is done
in the base class on ``Decimal`` values and dispatched through the unit.
"""

from __future__ import annotations

import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from market.domain.exceptions import (
    InsufficientStock,
    InvalidArgument,
    InvalidQuantity,
    ValidationError,
)
from market.domain.model.value_objects import ZERO, Money, UnitKind


def _require_text(value: str, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{what} cannot be empty")
    return value.strip()


def _require_price(price: Money) -> Money:
    if not isinstance(price, Money):
        raise InvalidArgument(f"Price must be Money, got {type(price).__name__}")
    if price.amount <= ZERO:
        raise InvalidArgument("Product price must be greater than zero")
    return price


@dataclass(eq=False)
class Product(ABC):
    """A sellable item in the catalog.

    This is an aggregate root.  Identity is the object itself (``eq=False``
    keeps the default identity hash), so two products with identical fields
    are still two different cart keys.  ``id`` is a stable handle for
    logging and display.

    Stock mutations hold a per-product lock so that concurrent carts cannot
    both pass the availability check before either one decrements.
    """

    unit: ClassVar[UnitKind]

    title: str
    description: str
    category: str
    subcategory: str
    price: Money
    id: str = field(init=False, default_factory=lambda: uuid.uuid4().hex)
    _lock: threading.RLock = field(
        init=False, repr=False, default_factory=threading.RLock
    )

    def __post_init__(self) -> None:
        self.title = _require_text(self.title, "Title")
        self.description = _require_text(self.description, "Description")
        self.category = _require_text(self.category, "Category")
        self.subcategory = _require_text(self.subcategory, "Subcategory")
        self.price = _require_price(self.price)

    # --- Stock access (per variant) -------------------------------------------

    @property
    @abstractmethod
    def available(self) -> Decimal:
        """Live stock in the product's unit."""

    @abstractmethod
    def _store_stock(self, amount: Decimal) -> None:
        """Write an already-validated stock level."""

    # --- Purchase rules -------------------------------------------------------

    def validate_purchase(self, amount: str | float | int | Decimal) -> bool:
        """True if *amount* is a valid positive amount within live stock."""
        try:
            quantity = self.unit.purchase_amount(amount)
        except ValidationError:
            return False
        return quantity <= self.available

    def reduce_stock(self, amount: str | float | int | Decimal) -> None:
        """Permanently take *amount* out of stock.

        Raises InvalidQuantity if ``validate_purchase(amount)`` is false.
        """
        with self._lock:
            if not self.validate_purchase(amount):
                raise InvalidQuantity(
                    f"Cannot reduce stock of {self.title} by {amount} "
                    f"(available {self.unit.format(self.available)})"
                )
            self._store_stock(self.available - self.unit.purchase_amount(amount))

    def reserve(self, amount: str | float | int | Decimal) -> Decimal:
        """Atomically check and take *amount* out of stock for a cart.

        Unlike ``reduce_stock`` the failure is typed: a malformed amount
        raises InvalidQuantity, an amount above live stock raises
        InsufficientStock.
        """
        quantity = self.unit.purchase_amount(amount)
        with self._lock:
            if quantity > self.available:
                raise InsufficientStock(
                    f"Insufficient stock for {self.title} "
                    f"(need {self.unit.format(quantity)}, "
                    f"have {self.unit.format(self.available)})"
                )
            self._store_stock(self.available - quantity)
        return quantity

    def release(self, amount: str | float | int | Decimal) -> None:
        """Return previously reserved stock."""
        quantity = self.unit.purchase_amount(amount)
        with self._lock:
            self._store_stock(self.available + quantity)

    def validate(self) -> bool:
        """Sanity check after construction or edit."""
        return self.price.amount > ZERO and self.available >= ZERO

    # --- Editing --------------------------------------------------------------

    def edit(
        self,
        title: str,
        description: str,
        price: Money,
        quantity: str | float | int | Decimal,
    ) -> None:
        """Replace title, description, price and stock in one step.

        Every field is validated before anything is assigned, so either all
        four changes apply or none do.  Category and subcategory are fixed.
        """
        new_title = _require_text(title, "Title")
        new_description = _require_text(description, "Description")
        new_price = _require_price(price)
        new_stock = self.unit.stock_level(quantity)

        with self._lock:
            self.title = new_title
            self.description = new_description
            self.price = new_price
            self._store_stock(new_stock)


@dataclass(eq=False)
class PieceProduct(Product):
    """Sold in whole pieces (``τεμάχια``)."""

    unit: ClassVar[UnitKind] = UnitKind.PIECE

    available_pieces: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.available_pieces, bool) or not isinstance(
            self.available_pieces, int
        ):
            raise InvalidQuantity(
                f"Available pieces must be an integer, got {self.available_pieces!r}"
            )
        if self.available_pieces < 0:
            raise InvalidArgument("Available pieces cannot be negative")

    @property
    def available(self) -> Decimal:
        return Decimal(self.available_pieces)

    def _store_stock(self, amount: Decimal) -> None:
        self.available_pieces = int(amount)


@dataclass(eq=False)
class WeightProduct(Product):
    """Sold by weight in kilograms; fractional amounts allowed."""

    unit: ClassVar[UnitKind] = UnitKind.WEIGHT

    available_weight: Decimal

    def __post_init__(self) -> None:
        super().__post_init__()
        self.available_weight = self.unit.stock_level(self.available_weight)

    @property
    def available(self) -> Decimal:
        return self.available_weight

    def _store_stock(self, amount: Decimal) -> None:
        self.available_weight = amount
