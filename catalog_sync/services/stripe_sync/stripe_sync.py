from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Tuple

import stripe

from .errors import EmptyCatalogError, MissingCredentialError
from .schemas import EntitySchema, price_schema, product_schema
from .store import CatalogStore
from .types import StripeSyncConfig, Sync, SyncStats


DEFAULT_API_VERSION = '2022-11-15'


class StripeSync:
    """Mirror the active Stripe catalog into the local product/price tables.

    A sync is a full destructive replace: both tables are emptied and refilled
    from the first page of active products and prices. Nothing is retried and
    the delete is not rolled back if inserts fail afterwards.
    """

    def __init__(self, config: StripeSyncConfig, store: Optional[CatalogStore] = None):
        """Initialize StripeSync.

        Args:
            config: Configuration for the Stripe client
            store: Persistence client, defaults to one bound to the app session

        Raises:
            MissingCredentialError: If no Stripe secret key is configured
        """
        if not config.stripe_secret_key:
            raise MissingCredentialError()

        self.config = config
        self.config.stripe_api_version = config.stripe_api_version or DEFAULT_API_VERSION

        # Initialize Stripe client
        stripe.api_key = config.stripe_secret_key
        stripe.api_version = self.config.stripe_api_version
        stripe.set_app_info(config.app_name, version=config.app_version)

        self.store = store or CatalogStore()

        self._log('info', f'StripeSync initialized with stripe_api_version={self.config.stripe_api_version}')

    def _log(self, level: str, message: str, *args: Any, **kwargs: Any) -> None:
        if self.config.logger:
            getattr(self.config.logger, level)(message, *args, **kwargs)

    def sync(self) -> SyncStats:
        """Run one full catalog sync.

        Returns:
            Insert results per table, with ``synced`` taken from the final row counts

        Raises:
            EmptyCatalogError: If Stripe returned no active prices or no active products
        """
        self._log('info', 'Starting sync with Stripe')

        products, prices = self.fetch_catalog()

        # Prices are checked first, so an entirely empty catalog reports prices
        if len(prices) == 0:
            raise EmptyCatalogError('prices')
        if len(products) == 0:
            raise EmptyCatalogError('products')

        self.cleanup()

        product_result = self.seed_products(products)
        price_result = self.seed_prices(prices)

        stats: SyncStats = {
            'products': {'synced': self.store.count_products(), 'skipped': product_result['skipped']},
            'prices': {'synced': self.store.count_prices(), 'skipped': price_result['skipped']},
        }
        self._print_stats(stats)

        self._log('info', 'Sync completed successfully')
        return stats

    def fetch_catalog(self) -> Tuple[List[Any], List[Any]]:
        """Fetch the first page of active products and prices concurrently.

        Returns:
            Tuple of (products, prices)
        """
        self._log('info', 'Fetching active products and prices from Stripe')

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix='stripe-fetch') as executor:
            products_future = executor.submit(stripe.Product.list, active=True)
            prices_future = executor.submit(stripe.Price.list, active=True)
            products = products_future.result()
            prices = prices_future.result()

        self._log('info', f'Fetched {len(products.data)} products and {len(prices.data)} prices')
        return list(products.data), list(prices.data)

    def cleanup(self) -> None:
        """Delete all prices, then all products."""
        deleted_prices = self.store.delete_prices()
        deleted_products = self.store.delete_products()
        self._log('info', f'Deleted {deleted_prices} prices and {deleted_products} products')

    def seed_products(self, products: List[Any]) -> Sync:
        """Insert products one at a time, skipping the ones that fail."""
        return self._seed(products, product_schema, self.store.insert_product, 'product')

    def seed_prices(self, prices: List[Any]) -> Sync:
        """Insert prices one at a time, skipping the ones that fail."""
        return self._seed(prices, price_schema, self.store.insert_price, 'price')

    def _seed(
        self,
        entities: List[Any],
        schema: EntitySchema,
        insert: Callable[[Dict[str, Any]], Any],
        label: str
    ) -> Sync:
        """Translate and insert entities in fetch order.

        Args:
            entities: Stripe objects to insert
            schema: Schema translating each object into row fields
            insert: Store operation inserting a single row
            label: Entity name used in log messages

        Returns:
            Count of inserted and skipped records
        """
        synced = 0
        skipped = 0
        for entity in entities:
            try:
                insert(schema.translate(entity))
                synced += 1
            except Exception as err:
                skipped += 1
                self._log('warning', f'Skipping {label} {_entity_id(entity)}: {err}')

        self._log('info', f'Inserted {synced} {label}s, skipped {skipped}')
        return {'synced': synced, 'skipped': skipped}

    def _print_stats(self, stats: SyncStats) -> None:
        self._log('info', f"Products synced: {stats['products']['synced']}")
        self._log('info', f"Prices synced: {stats['prices']['synced']}")


def _entity_id(entity: Any) -> str:
    try:
        return str(entity['id'])
    except (KeyError, TypeError):
        return '<unknown>'
