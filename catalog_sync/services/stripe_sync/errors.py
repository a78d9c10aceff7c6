"""Fatal errors raised by the catalog sync."""


class StripeSyncError(RuntimeError):
    """Base class for errors that abort the whole sync."""


class MissingCredentialError(StripeSyncError):
    """Raised when no Stripe secret key is configured."""

    def __init__(self, variable: str = 'STRIPE_SECRET_KEY'):
        super().__init__(f'{variable} environment variable not set')
        self.variable = variable


class EmptyCatalogError(StripeSyncError):
    """Raised when Stripe returns no active records for an entity."""

    def __init__(self, entity: str):
        super().__init__(f'No {entity} found on Stripe')
        self.entity = entity
