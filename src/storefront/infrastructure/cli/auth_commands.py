"""CLI commands for accounts and sessions.

The CLI keeps no session state between runs: ``login`` prints the token
and later commands receive it through ``--token`` or ``STOREFRONT_TOKEN``.
"""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.application.session import StartSessionHandler
from storefront.infrastructure.cli.runner import current_session, run_with_wiring


@click.command("login")
@click.option("--email", required=True, help="Account e-mail.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Account password.")
@click.pass_obj
def auth_login(obj: dict, email: str, password: str) -> None:
    """Log in and print a session token."""

    async def work(wiring):
        handler = StartSessionHandler(wiring.user_repo, wiring.auth_service)
        return await handler.handle(email, password)

    session = run_with_wiring(obj, work)
    click.echo(f"Logged in as {session.user.name} <{session.user.email}> ({session.user.role.value})")
    click.echo(f"export STOREFRONT_TOKEN={session.token}")


@click.command("whoami")
@click.pass_obj
def auth_whoami(obj: dict) -> None:
    """Show the user the current token belongs to."""

    async def work(wiring):
        return await current_session(wiring, obj["token"])

    session = run_with_wiring(obj, work)
    click.echo(f"{session.user.name} <{session.user.email}> ({session.user.role.value})")


@click.command("register")
@click.option("--email", required=True, help="Account e-mail.")
@click.option("--name", required=True, help="Display name.")
@click.option(
    "--role",
    type=click.Choice(["customer", "admin"]),
    default="customer",
    show_default=True,
    help="Account role.",
)
@click.pass_obj
def auth_register(obj: dict, email: str, name: str, role: str) -> None:
    """Register a new account."""

    async def work(wiring):
        return await RegisterUserHandler(wiring.user_repo).handle(email, name, role)

    user = run_with_wiring(obj, work)
    click.echo(f"User #{user.id} '{user.email}' registered as {user.role.value}")
