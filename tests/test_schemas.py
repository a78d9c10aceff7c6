"""Tests for translating Stripe objects into catalog rows."""

from datetime import UTC, datetime

import pytest

from catalog_sync.services.stripe_sync.schemas import EntitySchema, price_schema, product_schema
from catalog_sync.services.stripe_sync.schemas.types import get_field, to_optional_string, to_plain

from conftest import make_price, make_product


class TestProductSchema:
    def test_minimal_product_defaults(self):
        row = product_schema.to_row(make_product())

        assert row["id"] == "prod_1"
        assert row["name"] == "Pro"
        assert row["description"] == ""
        assert row["image"] == ""
        assert row["features"] == []
        assert row["metadata_"] == {}
        assert row["unit_label"] is None
        assert row["created"] == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)

    def test_keeps_first_image_and_feature_names(self):
        product = make_product(
            description="Everything included",
            images=["https://img.example/a.png", "https://img.example/b.png"],
            features=[{"name": "SSO"}, {"name": "Audit log"}],
            metadata={"tier": "pro"},
            unit_label="seat",
        )

        row = product_schema.to_row(product)

        assert row["description"] == "Everything included"
        assert row["image"] == "https://img.example/a.png"
        assert row["features"] == ["SSO", "Audit log"]
        assert row["metadata_"] == {"tier": "pro"}
        assert row["unit_label"] == "seat"

    def test_falls_back_to_marketing_features(self):
        product = make_product(marketing_features=[{"name": "Priority support"}])
        del product["features"]

        assert product_schema.to_row(product)["features"] == ["Priority support"]

    def test_null_description_becomes_empty_string(self):
        assert product_schema.to_row(make_product(description=None))["description"] == ""

    def test_missing_name_raises(self):
        product = make_product()
        del product["name"]

        with pytest.raises(KeyError):
            product_schema.to_row(product)


class TestPriceSchema:
    def test_minimal_price(self):
        row = price_schema.to_row(make_price())

        assert row["id"] == "price_1"
        assert row["product_id"] == "prod_1"
        assert row["unit_amount"] == "1000"
        assert row["currency"] == "usd"
        assert row["billing_scheme"] == "per_unit"
        assert row["livemode"] is False
        assert row["tiers_mode"] == ""
        assert row["custom_unit_amount"] is None
        assert row["recurring"] is None
        assert row["lookup_key"] is None
        assert row["nickname"] is None
        assert row["unit_amount_decimal"] is None
        assert row["metadata_"] == {}
        assert row["created"] == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)

    def test_optional_fields_pass_through(self):
        price = make_price(
            tiers_mode="graduated",
            lookup_key="pro_monthly",
            nickname="Pro monthly",
            recurring={"interval": "month", "interval_count": 1},
            type="recurring",
            unit_amount_decimal="1000",
            livemode=True,
        )

        row = price_schema.to_row(price)

        assert row["tiers_mode"] == "graduated"
        assert row["lookup_key"] == "pro_monthly"
        assert row["nickname"] == "Pro monthly"
        assert row["recurring"] == {"interval": "month", "interval_count": 1}
        assert row["type"] == "recurring"
        assert row["unit_amount_decimal"] == "1000"
        assert row["livemode"] is True

    def test_missing_unit_amount_is_null(self):
        assert price_schema.to_row(make_price(unit_amount=None))["unit_amount"] is None

    def test_custom_unit_amount_is_stringified(self):
        row = price_schema.to_row(make_price(custom_unit_amount={"minimum": 500, "preset": 1000}))

        assert row["custom_unit_amount"] == '{"minimum": 500, "preset": 1000}'

    def test_expanded_product_contributes_its_id(self):
        row = price_schema.to_row(make_price(product={"id": "prod_9", "object": "product"}))

        assert row["product_id"] == "prod_9"


class TestProjection:
    def test_project_keeps_only_listed_properties(self):
        product = make_product(livemode=True, package_dimensions=None, url="https://example.com")

        projected = product_schema.project(product)

        assert set(projected) == {"id", "name", "images", "features", "metadata", "created"}

    def test_project_skips_missing_properties(self):
        projected = price_schema.project({"id": "price_1", "currency": "usd"})

        assert projected == {"id": "price_1", "currency": "usd"}

    def test_translate_hands_projection_to_row_builder(self):
        seen = []
        schema = EntitySchema(properties=["id"], to_row=lambda entity: seen.append(entity) or {"id": entity["id"]})

        assert schema.translate({"id": "prod_1", "object": "product"}) == {"id": "prod_1"}
        assert seen == [{"id": "prod_1"}]

    def test_translate_matches_full_row(self):
        product = make_product(marketing_features=[{"name": "SSO"}], statement_descriptor="PRO")
        del product["features"]

        row = product_schema.translate(product)

        assert row["features"] == ["SSO"]
        assert row == product_schema.to_row(product)


class TestHelpers:
    def test_get_field_defaults(self):
        assert get_field({"a": None}, "a", "x") == "x"
        assert get_field({}, "a", 3) == 3
        assert get_field({"a": 0}, "a", 3) == 0

    def test_to_plain_converts_nested_objects(self):
        class Obj:
            def to_dict(self):
                return {"nested": [{"k": 1}]}

        assert to_plain({"outer": Obj()}) == {"outer": {"nested": [{"k": 1}]}}

    def test_to_optional_string(self):
        assert to_optional_string(None) is None
        assert to_optional_string(0) == "0"
        assert to_optional_string("abc") == "abc"
