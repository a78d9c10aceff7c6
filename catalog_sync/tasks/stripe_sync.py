"""Entry point for the one-shot Stripe catalog sync."""

import logging
import os
import sys
import threading


def run(app=None) -> int:
    """Run one catalog sync against the configured Stripe account.

    Args:
        app: Flask application instance. If None, one is built from the environment.

    Returns:
        int: Process exit status, 0 on success and 1 on any fatal error
    """
    try:
        if app is None:
            from catalog_sync import create_app

            app = create_app()

        from catalog_sync.services.stripe_service import StripeService
        from catalog_sync.services.stripe_sync.errors import StripeSyncError

        with app.app_context():
            StripeService.initialize(app)
            sync_engine = StripeService.get_instance()
            if not sync_engine:
                raise StripeSyncError("Stripe sync engine not initialized")
            result = sync_engine.sync()

        logging.info("💳 Stripe sync completed: %s", result)
        return 0

    except Exception as e:
        logging.error("❌ Error syncing with Stripe: %s", e, exc_info=True)
        return 1


def _log_uncaught(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical(
        "❌ Uncaught exception: %s", exc_value, exc_info=(exc_type, exc_value, exc_traceback)
    )


def _exit_on_thread_exception(args):
    if args.exc_type is SystemExit:
        return
    _log_uncaught(args.exc_type, args.exc_value, args.exc_traceback)
    logging.shutdown()
    # Background threads cannot raise into the main thread, so end the process here
    os._exit(1)


def install_exception_hooks():
    """Log exceptions escaping the main flow and fail the process on them."""
    sys.excepthook = _log_uncaught
    threading.excepthook = _exit_on_thread_exception


def main():
    install_exception_hooks()
    sys.exit(run())


if __name__ == "__main__":
    main()
