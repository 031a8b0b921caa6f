"""JSON-file-backed implementation of OrderRepository.

Each record keeps a full snapshot of the ordered products, so a history
entry still reads correctly after the product was edited or removed from
the catalog.  Reconstituted lines point at detached Product objects built
from that snapshot (with no stock of their own).
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from market.domain.model.order import Order, OrderLine
from market.domain.model.product import PieceProduct, Product, WeightProduct
from market.domain.model.value_objects import Money, Quantity, UnitKind
from market.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def list_for_customer(self, username: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["customer"] == username
        ]

    def add(self, username: str, order: Order) -> None:
        orders = self._load_raw()
        if any(raw["id"] == order.order_id for raw in orders):
            return
        orders.append(self._to_raw(username, order))
        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(username: str, order: Order) -> dict:
        return {
            "id": order.order_id,
            "customer": username,
            "created_at": order.order_date.isoformat(),
            "lines": [
                {
                    "title": line.product.title,
                    "description": line.product.description,
                    "category": line.product.category,
                    "subcategory": line.product.subcategory,
                    "unit": line.quantity.unit.value,
                    "quantity": str(line.quantity.value),
                    "unit_price": str(line.unit_price.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = []
        for item in raw["lines"]:
            unit = UnitKind(item["unit"])
            price = Money(Decimal(item["unit_price"]))
            lines.append(
                OrderLine(
                    product=_snapshot_product(item, unit, price),
                    quantity=Quantity(Decimal(item["quantity"]), unit),
                    unit_price=price,
                )
            )
        return Order(
            order_id=raw["id"],
            lines=tuple(lines),
            order_date=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _snapshot_product(item: dict, unit: UnitKind, price: Money) -> Product:
    fields = (item["title"], item["description"], item["category"], item["subcategory"], price)
    if unit is UnitKind.PIECE:
        return PieceProduct(*fields, available_pieces=0)
    return WeightProduct(*fields, available_weight=Decimal("0"))
