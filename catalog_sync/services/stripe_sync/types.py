from typing import Optional, Any, TypedDict
from dataclasses import dataclass


@dataclass
class StripeSyncConfig:
    """Configuration for StripeSync.

    Args:
        stripe_secret_key: Stripe secret key used to authenticate requests to the Stripe API
        stripe_api_version: Stripe API version pinned on the client (default: '2022-11-15')
        app_name: Name reported to Stripe through the app info header
        app_version: Version reported to Stripe through the app info header
        logger: Logger instance (optional)
    """
    stripe_secret_key: Optional[str]
    stripe_api_version: Optional[str] = None
    app_name: str = 'stripe-catalog-sync'
    app_version: Optional[str] = None
    logger: Optional[Any] = None


class Sync(TypedDict):
    """Result of a sync operation for one table."""
    synced: int
    skipped: int


class SyncStats(TypedDict):
    """Result of a full catalog sync."""
    products: Sync
    prices: Sync
