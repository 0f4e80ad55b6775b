"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.create_product import CreateProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.restock_product import RestockProductHandler
from storefront.application.session import require_admin
from storefront.infrastructure.cli.runner import current_session, run_with_wiring


@click.command("list")
@click.pass_obj
def product_list(obj: dict) -> None:
    """List all products in the catalog."""

    async def work(wiring):
        return await ListProductsHandler(wiring.product_repo).handle()

    products = run_with_wiring(obj, work)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Price':>14} {'Stock':>7}")
    click.echo("-" * 78)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {str(p.price):>14} {p.stock:>7}")


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_create(obj: dict, name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog (admin only)."""

    async def work(wiring):
        require_admin(await current_session(wiring, obj["token"]))
        handler = CreateProductHandler(wiring.product_repo, currency=wiring.currency)
        return await handler.handle(name=name, price=price, stock=stock)

    product = run_with_wiring(obj, work)
    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock} in stock)"
    )


@click.command("restock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.pass_obj
def product_restock(obj: dict, product_id: str, quantity: int) -> None:
    """Add units to a product's stock (admin only)."""

    async def work(wiring):
        require_admin(await current_session(wiring, obj["token"]))
        return await RestockProductHandler(wiring.product_repo).handle(product_id, quantity)

    product = run_with_wiring(obj, work)
    click.echo(f"Product #{product.id} now has {product.stock} in stock")
