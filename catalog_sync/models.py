"""Local mirror of the Stripe product catalog."""

from .extensions import db


class StripeProduct(db.Model):
    __tablename__ = "stripe_product"

    id = db.Column(db.String, primary_key=True)
    description = db.Column(db.Text, nullable=False, default="")
    features = db.Column(db.JSON, nullable=False, default=list)
    image = db.Column(db.String, nullable=False, default="")
    # "metadata" is reserved on declarative models
    metadata_ = db.Column("metadata", db.JSON, nullable=False, default=dict)
    name = db.Column(db.String, nullable=False)
    unit_label = db.Column(db.String, nullable=True)
    created = db.Column(db.DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<StripeProduct {self.id} {self.name!r}>"


class StripePrice(db.Model):
    __tablename__ = "stripe_price"

    id = db.Column(db.String, primary_key=True)
    billing_scheme = db.Column(db.String, nullable=True)
    created = db.Column(db.DateTime(timezone=True), nullable=False)
    currency = db.Column(db.String, nullable=False)
    custom_unit_amount = db.Column(db.String, nullable=True)
    livemode = db.Column(db.Boolean, nullable=False, default=False)
    lookup_key = db.Column(db.String, nullable=True)
    metadata_ = db.Column("metadata", db.JSON, nullable=False, default=dict)
    nickname = db.Column(db.String, nullable=True)
    # No foreign key: products are always inserted first in the same batch
    product_id = db.Column(db.String, nullable=False, index=True)
    recurring = db.Column(db.JSON, nullable=True)
    tiers_mode = db.Column(db.String, nullable=False, default="")
    type = db.Column(db.String, nullable=True)
    unit_amount = db.Column(db.String, nullable=True)
    unit_amount_decimal = db.Column(db.String, nullable=True)

    def __repr__(self):
        return f"<StripePrice {self.id} product={self.product_id}>"
