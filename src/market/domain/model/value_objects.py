"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from market.domain.exceptions import InvalidArgument, InvalidQuantity

ZERO = Decimal("0")


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce a numeric input to Decimal without binary float artefacts.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.1")``.
    """
    if isinstance(value, bool):
        raise InvalidArgument(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgument(f"Not a number: {value!r}") from exc
    if not result.is_finite():
        raise InvalidArgument(f"Not a finite number: {value!r}")
    return result


class UnitKind(Enum):
    """How a product is sold: whole pieces or continuous weight (kg).

    Every unit-dependent rule dispatches on this discriminant instead of
    inspecting the product's class.
    """

    PIECE = "PIECE"
    WEIGHT = "WEIGHT"

    @property
    def label(self) -> str:
        return "pieces" if self is UnitKind.PIECE else "kg"

    def stock_level(self, value: str | float | int | Decimal) -> Decimal:
        """Validate a stock figure (zero allowed)."""
        amount = to_decimal(value)
        if amount < ZERO:
            raise InvalidArgument("Quantity cannot be negative")
        return self._normalize(amount)

    def purchase_amount(self, value: str | float | int | Decimal) -> Decimal:
        """Validate an amount to buy, reserve or release (must be positive)."""
        amount = to_decimal(value)
        if amount <= ZERO:
            raise InvalidQuantity(f"Quantity must be positive, got {amount}")
        return self._normalize(amount)

    def format(self, amount: Decimal) -> str:
        if self is UnitKind.PIECE:
            return f"{amount:f} {self.label}"
        return f"{amount:.3f} {self.label}"

    def _normalize(self, amount: Decimal) -> Decimal:
        if self is UnitKind.WEIGHT:
            return amount
        whole = amount.to_integral_value()
        if amount != whole:
            raise InvalidQuantity(
                f"Piece products are sold in whole units, got {amount}"
            )
        return whole


@dataclass(frozen=True)
class Money:
    """Monetary amount in euros.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidArgument(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < ZERO:
            raise InvalidArgument(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"€{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount))

    @staticmethod
    def zero() -> Money:
        return Money(ZERO)


@dataclass(frozen=True)
class Quantity:
    """A positive amount in a product's unit.

    Enforces the invariant that you cannot order zero, negative or (for
    piece products) fractional amounts.
    """

    value: Decimal
    unit: UnitKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.unit.purchase_amount(self.value))

    def __str__(self) -> str:
        return self.unit.format(self.value)
