"""Glue between synchronous click commands and the async use cases."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import click

from storefront.application.session import RestoreSessionHandler, Session
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Wiring
from storefront.infrastructure.rest.client import ApiError

T = TypeVar("T")


def run_with_wiring(obj: dict[str, Any], work: Callable[[Wiring], Awaitable[T]]) -> T:
    """Open the configured wiring, run *work* inside it and return its result.

    Domain and API errors become ``click.ClickException`` so the user sees
    a one-line message instead of a traceback.
    """

    async def _main() -> T:
        async with obj["wiring"](obj["settings"], obj["token"]) as wiring:
            return await work(wiring)

    try:
        return asyncio.run(_main())
    except (DomainException, ApiError) as exc:
        raise click.ClickException(str(exc))


async def current_session(wiring: Wiring, token: str | None) -> Session:
    return await RestoreSessionHandler(wiring.auth_service).handle(token)
