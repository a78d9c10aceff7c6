from types import SimpleNamespace

import pytest
import stripe

from catalog_sync import create_app
from catalog_sync.config import TestingConfig
from catalog_sync.extensions import db
from catalog_sync.services.stripe_service import StripeService
from catalog_sync.services.stripe_sync.store import CatalogStore


@pytest.fixture
def app():
    StripeService.reset()
    app = create_app(TestingConfig())

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

    StripeService.reset()


@pytest.fixture
def store(app):
    return CatalogStore()


def make_product(product_id="prod_1", **fields):
    product = {
        "id": product_id,
        "object": "product",
        "name": "Pro",
        "images": [],
        "features": [],
        "metadata": {},
        "created": 1700000000,
    }
    product.update(fields)
    return product


def make_price(price_id="price_1", product="prod_1", **fields):
    price = {
        "id": price_id,
        "object": "price",
        "product": product,
        "unit_amount": 1000,
        "currency": "usd",
        "billing_scheme": "per_unit",
        "created": 1700000000,
        "livemode": False,
    }
    price.update(fields)
    return price


class FakeCatalog:
    """Stands in for ``stripe.Product.list`` and ``stripe.Price.list``."""

    def __init__(self):
        self.products = []
        self.prices = []
        self.calls = []
        self.product_error = None
        self.price_error = None

    def list_products(self, **params):
        self.calls.append(("products", params))
        if self.product_error:
            raise self.product_error
        return SimpleNamespace(data=list(self.products))

    def list_prices(self, **params):
        self.calls.append(("prices", params))
        if self.price_error:
            raise self.price_error
        return SimpleNamespace(data=list(self.prices))


@pytest.fixture
def stripe_catalog(monkeypatch):
    catalog = FakeCatalog()
    monkeypatch.setattr(stripe.Product, "list", catalog.list_products)
    monkeypatch.setattr(stripe.Price, "list", catalog.list_prices)
    return catalog
