"""Administrative command-line interface."""

__all__ = ["main", "help", "run", "hash_password", "check_passwords"]

from pathlib import Path

import click
import uvicorn
from safir.click import display_help

from .exceptions import CredentialLoadError
from .passwords import DEFAULT_ROUNDS, MAX_PASSWORD_BYTES
from .passwords import hash_password as _hash_password
from .storage.credentials import CredentialStore


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Administrative command-line interface for passgate."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.argument("subtopic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None, subtopic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic, subtopic)


@main.command()
@click.option(
    "--port", default=8080, type=int, help="Port to run the application on."
)
def run(port: int) -> None:
    """Run the application (for production)."""
    uvicorn.run("passgate.main:create_app", factory=True, port=port)


@main.command("hash-password")
@click.option(
    "--rounds",
    default=DEFAULT_ROUNDS,
    type=click.IntRange(4, 31),
    show_default=True,
    help="bcrypt cost factor.",
)
@click.password_option(help="Password to hash (prompted if not given).")
@click.argument("username")
def hash_password(rounds: int, password: str, username: str) -> None:
    """Print a password file line for USERNAME.

    The password file itself is not modified; append the printed line to it
    and restart the application.
    """
    if any(c.isspace() for c in username) or username.startswith("#"):
        raise click.BadParameter(
            "must not contain whitespace or start with '#'",
            param_hint="USERNAME",
        )
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise click.BadParameter(
            f"must not be longer than {MAX_PASSWORD_BYTES} bytes",
            param_hint="--password",
        )
    password_hash = _hash_password(password, rounds=rounds).decode()
    click.echo(f"{username} {password_hash}")


@main.command("check-passwords")
@click.argument(
    "path", type=click.Path(dir_okay=False, path_type=Path), nargs=1
)
def check_passwords(path: Path) -> None:
    """Validate the password file at PATH."""
    try:
        store = CredentialStore.from_file(path)
    except CredentialLoadError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{path}: {len(store)} users")
