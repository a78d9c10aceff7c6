import sys

import click


def register_commands(app):
    """Attach the catalog commands to the ``flask`` CLI."""

    @app.cli.command("sync-stripe")
    def sync_stripe_command():
        """Replace the local catalog with the active Stripe products and prices."""
        from catalog_sync.tasks.stripe_sync import install_exception_hooks, run

        install_exception_hooks()
        code = run(app)
        if code != 0:
            click.echo("Stripe sync failed, see the log for details.", err=True)
        sys.exit(code)
