"""Stripe catalog sync engine.

Mirrors the active Stripe products and prices into the local database by
wiping and refilling the ``stripe_product`` and ``stripe_price`` tables.
"""

from .errors import EmptyCatalogError, MissingCredentialError, StripeSyncError
from .store import CatalogStore
from .stripe_sync import StripeSync
from .types import StripeSyncConfig, Sync, SyncStats


__all__ = [
    'CatalogStore',
    'EmptyCatalogError',
    'MissingCredentialError',
    'StripeSync',
    'StripeSyncConfig',
    'StripeSyncError',
    'Sync',
    'SyncStats',
]
