import click
from flask import current_app
from flask.cli import with_appcontext
from itsdangerous import BadSignature
from back_mark import SLOTS
from db_core_entries import seed_items


@click.command("back-mark-inspect")
@click.argument("cookie")
@with_appcontext
def cli_back_mark_inspect(cookie: str):
    """Decode a signed session COOKIE and print its back mark slots."""
    serializer = current_app.session_interface.get_signing_serializer(current_app)
    if serializer is None:
        click.echo("No SECRET_KEY configured, cannot decode session cookies.", err=True)
        raise SystemExit(1)

    try:
        data = serializer.loads(cookie)
    except BadSignature as e:
        click.echo(f"Invalid session cookie: {e}", err=True)
        raise SystemExit(1)

    prefix = current_app.config["BACK_MARK_SESSION_PREFIX"]
    for slot in SLOTS:
        value = data.get(f"{prefix}{slot}")
        click.echo(f"{slot}: {value if value is not None else '-'}")


@click.command("back-mark-settings")
@with_appcontext
def cli_back_mark_settings():
    """Print the effective BACK_MARK_* settings."""
    for key in sorted(k for k in current_app.config if k.startswith("BACK_MARK_")):
        value = current_app.config[key]
        if isinstance(value, (list, tuple, set, frozenset)):
            value = ", ".join(value)
        click.echo(f"{key} = {value}")


@click.command("seed-items")
@with_appcontext
def cli_seed_items():
    """Seed demo items, unless the table already has some."""
    created = seed_items()
    if created:
        click.echo(f"Seeded {created} items.")
    else:
        click.echo("Items already present, nothing seeded.")
