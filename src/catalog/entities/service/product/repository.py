"""Product repository."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sqlalchemy import func
from sqlmodel import Session, select

from .entity import Product
from .table import RATE_SCALE, ProductTable

_RATE_QUANTUM = Decimal(1).scaleb(-RATE_SCALE)


def _row_values(product: Product) -> dict[str, Any]:
    """Column values for ``product``, with rate rounded to the column scale."""
    values = product.model_dump(exclude={"id"})
    values["rate"] = Decimal(values["rate"]).quantize(
        _RATE_QUANTUM, rounding=ROUND_HALF_UP
    )
    return values


class ProductRepository:
    """Data-access layer for products.

    Wraps a single ``Session``; nothing is made durable until ``commit`` is
    called. Rates are stored with two decimal places, rounded half up, on
    both insert and update.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, product: Product) -> Product:
        """Stage a new product and return it with its store-generated id."""
        row = ProductTable(**_row_values(product))
        self._session.add(row)
        self._session.flush()
        return Product.model_validate(row, from_attributes=True)

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def list_all(self) -> Sequence[Product]:
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def update(self, product: Product) -> Product | None:
        """Overwrite every stored field of ``product`` except its id.

        Returns None when no row with that id exists.
        """
        row = self._session.get(ProductTable, product.id)
        if row is None:
            return None

        for field, value in _row_values(product).items():
            setattr(row, field, value)
        self._session.add(row)
        self._session.flush()
        return Product.model_validate(row, from_attributes=True)

    def remove(self, product_id: int) -> bool:
        """Stage deletion of a product. Returns False if it does not exist."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def count(self) -> int:
        statement = select(func.count()).select_from(ProductTable)
        return self._session.exec(statement).one()

    def commit(self) -> None:
        self._session.commit()
