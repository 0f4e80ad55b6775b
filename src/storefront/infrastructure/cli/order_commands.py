"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.complete_order import CompleteOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.list_orders import ListCustomerOrdersHandler
from storefront.application.process_order import ProcessOrderHandler
from storefront.application.session import require_admin
from storefront.domain.model.order import Order
from storefront.infrastructure.cli.runner import current_session, run_with_wiring


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'p1:3,p2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{order.id}  (status={order.status.value})")
    click.echo(f"Customer: {order.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<34} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*70}")
    for item in order.items:
        click.echo(
            f"  {item.product_id:<34} {item.quantity:>5} "
            f"{str(item.price):>14} {str(item.line_total):>14}"
        )
    click.echo(f"  {'-'*70}")
    click.echo(f"  {'Order Total':<40} {str(order.total_amount):>30}")


@click.command("create")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_create(obj: dict, items: str) -> None:
    """Place an order for the logged-in customer."""
    specs = _parse_items(items)

    async def work(wiring):
        session = await current_session(wiring, obj["token"])
        handler = CreateOrderHandler(wiring.order_repo, wiring.product_repo)
        return await handler.handle(customer_id=session.user.id, item_specs=specs)

    order = run_with_wiring(obj, work)
    _display_order(order)


@click.command("list")
@click.pass_obj
def order_list(obj: dict) -> None:
    """List the logged-in customer's orders."""

    async def work(wiring):
        session = await current_session(wiring, obj["token"])
        return await ListCustomerOrdersHandler(wiring.order_repo).handle(session)

    orders = run_with_wiring(obj, work)

    if not orders:
        click.echo("No orders found.")
        return

    for index, order in enumerate(orders):
        if index:
            click.echo()
        _display_order(order)


@click.command("process")
@click.option("--id", "order_id", required=True, help="Order ID to process.")
@click.pass_obj
def order_process(obj: dict, order_id: str) -> None:
    """Start processing a pending order (admin only)."""

    async def work(wiring):
        require_admin(await current_session(wiring, obj["token"]))
        return await ProcessOrderHandler(wiring.order_repo).handle(order_id)

    order = run_with_wiring(obj, work)
    click.echo(f"Order #{order.id} is now {order.status.value}.")


@click.command("complete")
@click.option("--id", "order_id", required=True, help="Order ID to complete.")
@click.pass_obj
def order_complete(obj: dict, order_id: str) -> None:
    """Complete an order that is being processed (admin only)."""

    async def work(wiring):
        require_admin(await current_session(wiring, obj["token"]))
        return await CompleteOrderHandler(wiring.order_repo).handle(order_id)

    order = run_with_wiring(obj, work)
    click.echo(f"Order #{order.id} is now {order.status.value}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(obj: dict, order_id: str) -> None:
    """Cancel a pending or processing order."""

    async def work(wiring):
        await current_session(wiring, obj["token"])
        return await CancelOrderHandler(wiring.order_repo).handle(order_id)

    order = run_with_wiring(obj, work)
    click.echo(f"Order #{order.id} cancelled.")
