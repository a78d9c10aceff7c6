"""Stripe Sync Service - Singleton wrapper for the StripeSync engine."""

from typing import Optional

from catalog_sync import __version__
from catalog_sync.extensions import db
from catalog_sync.services.stripe_sync.errors import MissingCredentialError
from catalog_sync.services.stripe_sync.stripe_sync import StripeSync
from catalog_sync.services.stripe_sync.types import StripeSyncConfig


class StripeService:
    """Singleton service for managing the Stripe catalog sync."""

    _instance: Optional[StripeSync] = None

    @classmethod
    def initialize(cls, app) -> StripeSync:
        """Initialize the Stripe sync service from application config.

        Creates the catalog tables when they do not exist yet.

        Args:
            app: Flask application instance

        Returns:
            StripeSync: The initialized engine

        Raises:
            MissingCredentialError: If STRIPE_SECRET_KEY is not configured
        """
        if cls._instance is not None:
            return cls._instance

        stripe_secret_key = app.config.get("STRIPE_SECRET_KEY")
        if not stripe_secret_key:
            app.logger.error("Stripe service not configured (missing STRIPE_SECRET_KEY)")
            raise MissingCredentialError("STRIPE_SECRET_KEY")

        config = StripeSyncConfig(
            stripe_secret_key=stripe_secret_key,
            stripe_api_version=app.config.get("STRIPE_API_VERSION"),
            app_version=__version__,
            logger=app.logger,
        )

        with app.app_context():
            db.create_all()

        cls._instance = StripeSync(config)
        app.logger.info("Stripe service initialized")
        return cls._instance

    @classmethod
    def get_instance(cls) -> Optional[StripeSync]:
        """Get the singleton StripeSync instance.

        Returns:
            Optional[StripeSync]: The StripeSync instance if initialized, None otherwise
        """
        return cls._instance

    @classmethod
    def reset(cls):
        """Reset the singleton (useful for testing)."""
        cls._instance = None
