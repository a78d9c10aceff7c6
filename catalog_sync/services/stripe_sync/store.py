from typing import Any, Dict, Type

from sqlalchemy import delete, func, select

from catalog_sync.extensions import db
from catalog_sync.models import StripePrice, StripeProduct


class CatalogStore:
    """Persistence client for the mirrored catalog tables.

    Every write commits on its own; a failed insert is rolled back before the
    error is re-raised so the session stays usable for the next record.
    """

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def delete_all(self, model: Type[db.Model]) -> int:
        """Delete every row of ``model``'s table.

        Returns:
            Number of deleted rows
        """
        result = self.session.execute(delete(model))
        self.session.commit()
        return result.rowcount

    def insert(self, model: Type[db.Model], fields: Dict[str, Any]) -> Any:
        """Insert and commit a single row."""
        row = model(**fields)
        try:
            self.session.add(row)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return row

    def count(self, model: Type[db.Model]) -> int:
        """Return the current row count of ``model``'s table."""
        return self.session.scalar(select(func.count()).select_from(model))

    def delete_prices(self) -> int:
        return self.delete_all(StripePrice)

    def delete_products(self) -> int:
        return self.delete_all(StripeProduct)

    def insert_price(self, fields: Dict[str, Any]) -> StripePrice:
        return self.insert(StripePrice, fields)

    def insert_product(self, fields: Dict[str, Any]) -> StripeProduct:
        return self.insert(StripeProduct, fields)

    def count_prices(self) -> int:
        return self.count(StripePrice)

    def count_products(self) -> int:
        return self.count(StripeProduct)
