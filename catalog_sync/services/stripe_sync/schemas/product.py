from typing import Any, Dict

from .types import EntitySchema, epoch_to_datetime, get_field, to_plain


def _feature_names(product: Any) -> list[str]:
    # Older API versions expose "features", newer ones "marketing_features"
    features = get_field(product, 'features') or get_field(product, 'marketing_features') or []
    return [feature['name'] for feature in features]


def product_to_row(product: Any) -> Dict[str, Any]:
    """Translate a Stripe product into ``StripeProduct`` fields."""
    images = get_field(product, 'images') or []
    return {
        'id': product['id'],
        'description': get_field(product, 'description') or '',
        'features': _feature_names(product),
        'image': images[0] if len(images) > 0 else '',
        'metadata_': to_plain(get_field(product, 'metadata', {})),
        'name': product['name'],
        'unit_label': get_field(product, 'unit_label'),
        'created': epoch_to_datetime(product['created']),
    }


product_schema = EntitySchema(
    properties=[
        'id',
        'description',
        'features',
        'marketing_features',
        'images',
        'metadata',
        'name',
        'unit_label',
        'created',
    ],
    to_row=product_to_row,
)
