import click
from pydantic import ValidationError

from storefront.infrastructure.bootstrap import rest_wiring
from storefront.infrastructure.cli.auth_commands import (
    auth_login,
    auth_register,
    auth_whoami,
)
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_complete,
    order_create,
    order_list,
    order_process,
)
from storefront.infrastructure.cli.product_commands import (
    product_create,
    product_list,
    product_restock,
)
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--token", envvar="STOREFRONT_TOKEN", default=None, help="Session token from 'auth login'.")
@click.option("--base-url", default=None, help="Override the backend base URL.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log HTTP traffic.")
@click.pass_context
def cli(ctx: click.Context, token: str | None, base_url: str | None, verbose: bool) -> None:
    """Storefront — products, orders and accounts"""
    settings = get_settings()
    if base_url:
        try:
            settings = Settings(**{**settings.model_dump(), "API_BASE_URL": base_url})
        except ValidationError as exc:
            raise click.BadParameter(exc.errors()[0]["msg"], param_hint="--base-url")

    setup_logging("DEBUG" if verbose else settings.LOG_LEVEL, use_json=settings.LOG_JSON)

    ctx.ensure_object(dict)
    ctx.obj.setdefault("wiring", rest_wiring)
    ctx.obj["settings"] = settings
    ctx.obj["token"] = token


@cli.group()
def product() -> None:
    """Browse and manage products."""


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def auth() -> None:
    """Log in and manage accounts."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_list)
product.add_command(product_restock)
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_process)
auth.add_command(auth_login)
auth.add_command(auth_register)
auth.add_command(auth_whoami)
