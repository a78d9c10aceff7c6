from typing import Any, Dict

from .types import EntitySchema, epoch_to_datetime, get_field, to_optional_string, to_plain


def _product_id(price: Any) -> str:
    product = price['product']
    if isinstance(product, str):
        return product
    # Expanded product object
    return product['id']


def price_to_row(price: Any) -> Dict[str, Any]:
    """Translate a Stripe price into ``StripePrice`` fields."""
    recurring = get_field(price, 'recurring')
    return {
        'id': price['id'],
        'billing_scheme': get_field(price, 'billing_scheme'),
        'created': epoch_to_datetime(price['created']),
        'currency': price['currency'],
        'custom_unit_amount': to_optional_string(get_field(price, 'custom_unit_amount')),
        'livemode': bool(get_field(price, 'livemode', False)),
        'lookup_key': get_field(price, 'lookup_key'),
        'metadata_': to_plain(get_field(price, 'metadata', {})),
        'nickname': get_field(price, 'nickname'),
        'product_id': _product_id(price),
        'recurring': to_plain(recurring) if recurring is not None else None,
        'tiers_mode': str(get_field(price, 'tiers_mode', '')),
        'type': get_field(price, 'type'),
        'unit_amount': to_optional_string(get_field(price, 'unit_amount')),
        'unit_amount_decimal': to_optional_string(get_field(price, 'unit_amount_decimal')),
    }


price_schema = EntitySchema(
    properties=[
        'id',
        'billing_scheme',
        'created',
        'currency',
        'custom_unit_amount',
        'livemode',
        'lookup_key',
        'metadata',
        'nickname',
        'product',
        'recurring',
        'tiers_mode',
        'type',
        'unit_amount',
        'unit_amount_decimal',
    ],
    to_row=price_to_row,
)
