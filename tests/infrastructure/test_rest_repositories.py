"""Tests for the REST-backed repositories and authentication service.

Each test routes requests through ``httpx.MockTransport`` and checks both
the wire shape sent to the backend and the domain objects built from
its answers.
"""

import json

import httpx
import pytest

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.user import User, UserRole
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.rest.authentication_service import ApiAuthenticationService
from storefront.infrastructure.rest.client import ApiClient, ApiError
from storefront.infrastructure.rest.order_repository import ApiOrderRepository
from storefront.infrastructure.rest.product_repository import ApiProductRepository
from storefront.infrastructure.rest.user_repository import ApiUserRepository

pytestmark = pytest.mark.asyncio


class Backend:
    """Canned responses keyed by (method, path); records every request."""

    def __init__(self, routes: dict) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get((request.method, request.url.path), (404, None))
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def client(self, token=None) -> ApiClient:
        return ApiClient("http://api.test", token=token, transport=httpx.MockTransport(self))


# ── Products ─────────────────────────────────────────────────────────────────


class TestApiProductRepository:

    async def test_get_by_id(self):
        backend = Backend({
            ("GET", "/products/p1"): (200, {"id": "p1", "name": "Widget", "price": 10.5, "stock": 3}),
        })
        async with backend.client() as client:
            product = await ApiProductRepository(client).get_by_id("p1")
        assert product == Product(id="p1", name="Widget", price=Money.create("10.5"), stock=3)

    async def test_get_by_id_missing_returns_none(self):
        backend = Backend({})
        async with backend.client() as client:
            assert await ApiProductRepository(client).get_by_id("nope") is None

    async def test_list_all_uses_default_currency(self):
        backend = Backend({
            ("GET", "/products"): (200, [
                {"id": 1, "name": "Widget", "price": 2, "stock": 0},
                {"id": "p2", "name": "Gadget", "price": "3.25", "stock": 7, "currency": "USD"},
            ]),
        })
        async with backend.client() as client:
            products = await ApiProductRepository(client, currency="EUR").list_all()
        assert [p.id for p in products] == ["1", "p2"]
        assert products[0].price == Money.create(2, "EUR")
        assert products[1].price == Money.create("3.25", "USD")

    async def test_save_puts_product(self):
        backend = Backend({("PUT", "/products/p1"): (200, {})})
        product = Product(id="p1", name="Widget", price=Money.create("10.00"), stock=4)
        async with backend.client(token="abc") as client:
            await ApiProductRepository(client).save(product)

        request = backend.requests[0]
        assert request.headers["Authorization"] == "Bearer abc"
        assert json.loads(request.content) == {
            "id": "p1", "name": "Widget", "price": 10.0, "currency": "USD", "stock": 4,
        }

    async def test_server_error_propagates(self):
        backend = Backend({("GET", "/products"): (500, {"message": "boom"})})
        async with backend.client() as client:
            with pytest.raises(ApiError):
                await ApiProductRepository(client).list_all()

    @pytest.mark.parametrize("raw", [
        {"name": "Widget", "price": 1, "stock": 1},
        {"id": "p1", "name": "Widget", "price": 1, "stock": None},
        {"id": "p1", "name": "Widget", "price": 1, "stock": "lots"},
    ])
    async def test_malformed_product_is_an_api_error(self, raw):
        backend = Backend({("GET", "/products"): (200, [raw])})
        async with backend.client() as client:
            with pytest.raises(ApiError, match="Malformed product"):
                await ApiProductRepository(client).list_all()


# ── Orders ───────────────────────────────────────────────────────────────────


ORDER_JSON = {
    "id": "1700000000000",
    "customerId": "c1",
    "status": "processing",
    "items": [{"productId": "p1", "quantity": 2, "price": 10}],
    "totalAmount": 999,
}


class TestApiOrderRepository:

    async def test_get_by_id_recomputes_total(self):
        backend = Backend({("GET", "/orders/1700000000000"): (200, ORDER_JSON)})
        async with backend.client() as client:
            order = await ApiOrderRepository(client).get_by_id("1700000000000")

        assert order.status == OrderStatus.PROCESSING
        assert order.items == (OrderItem("p1", 2, Money.create(10)),)
        assert order.total_amount == Money.create(20)

    async def test_get_by_id_missing_returns_none(self):
        async with Backend({}).client() as client:
            assert await ApiOrderRepository(client).get_by_id("x") is None

    async def test_list_by_customer(self):
        backend = Backend({("GET", "/customers/c1/orders"): (200, [ORDER_JSON])})
        async with backend.client() as client:
            orders = await ApiOrderRepository(client).list_by_customer("c1")
        assert [o.customer_id for o in orders] == ["c1"]

    @pytest.mark.parametrize("override", [
        {"status": "shipped"},
        {"customerId": None, "id": None},
        {"items": [{"productId": "p1", "price": 10}]},
    ])
    async def test_malformed_order_is_an_api_error(self, override):
        raw = {k: v for k, v in {**ORDER_JSON, **override}.items() if v is not None}
        backend = Backend({("GET", "/customers/c1/orders"): (200, [raw])})
        async with backend.client() as client:
            with pytest.raises(ApiError, match="Malformed order"):
                await ApiOrderRepository(client).list_by_customer("c1")

    async def test_save_puts_camel_case_payload(self):
        backend = Backend({("PUT", "/orders/o1"): (200, {})})
        order = Order(id="o1", customer_id="c1").add_item(OrderItem("p1", 2, Money.create("10")))
        async with backend.client() as client:
            await ApiOrderRepository(client).save(order)

        assert json.loads(backend.requests[0].content) == {
            "id": "o1",
            "customerId": "c1",
            "status": "pending",
            "items": [{"productId": "p1", "quantity": 2, "price": 10.0, "currency": "USD"}],
            "totalAmount": 20.0,
        }


# ── Users and authentication ─────────────────────────────────────────────────


USER_JSON = {"id": "u1", "email": "alice@example.com", "name": "Alice", "role": "admin"}


class TestApiUserRepository:

    async def test_get_by_email_takes_first_match(self):
        backend = Backend({("GET", "/users"): (200, [USER_JSON, {**USER_JSON, "id": "u2"}])})
        async with backend.client() as client:
            user = await ApiUserRepository(client).get_by_email("alice@example.com")

        assert user == User(id="u1", email="alice@example.com", name="Alice", role=UserRole.ADMIN)
        assert backend.requests[0].url.params["email"] == "alice@example.com"

    async def test_get_by_email_empty_list_returns_none(self):
        backend = Backend({("GET", "/users"): (200, [])})
        async with backend.client() as client:
            assert await ApiUserRepository(client).get_by_email("x@example.com") is None

    async def test_unknown_role_is_an_api_error(self):
        backend = Backend({("GET", "/users"): (200, [{**USER_JSON, "role": "superuser"}])})
        async with backend.client() as client:
            with pytest.raises(ApiError, match="Malformed user"):
                await ApiUserRepository(client).get_by_email("alice@example.com")

    async def test_save_posts_user(self):
        backend = Backend({("POST", "/users"): (201, USER_JSON)})
        user = User(id="u1", email="alice@example.com", name="Alice", role=UserRole.ADMIN)
        async with backend.client() as client:
            await ApiUserRepository(client).save(user)
        assert json.loads(backend.requests[0].content) == USER_JSON


class TestApiAuthenticationService:

    async def test_authenticate_returns_token(self):
        backend = Backend({("POST", "/login"): (200, {"token": "jwt-123"})})
        async with backend.client() as client:
            token = await ApiAuthenticationService(client).authenticate("alice@example.com", "pw123456")

        assert token == "jwt-123"
        assert json.loads(backend.requests[0].content) == {
            "email": "alice@example.com", "password": "pw123456",
        }

    async def test_authenticate_rejected_credentials(self):
        backend = Backend({("POST", "/login"): (401, {"message": "bad credentials"})})
        async with backend.client() as client:
            with pytest.raises(AuthenticationError, match="Invalid email or password"):
                await ApiAuthenticationService(client).authenticate("alice@example.com", "pw123456")

    async def test_authenticate_without_token_in_response(self):
        backend = Backend({("POST", "/login"): (200, {})})
        async with backend.client() as client:
            with pytest.raises(AuthenticationError, match="did not include a token"):
                await ApiAuthenticationService(client).authenticate("alice@example.com", "pw123456")

    async def test_authenticate_server_error_is_not_an_auth_error(self):
        backend = Backend({("POST", "/login"): (503, None)})
        async with backend.client() as client:
            with pytest.raises(ApiError):
                await ApiAuthenticationService(client).authenticate("alice@example.com", "pw123456")

    async def test_validate_token_sends_that_token(self):
        backend = Backend({("GET", "/me"): (200, USER_JSON)})
        async with backend.client(token="other") as client:
            user = await ApiAuthenticationService(client).validate_token("jwt-123")

        assert user.is_admin
        assert backend.requests[0].headers["Authorization"] == "Bearer jwt-123"

    async def test_validate_token_rejected(self):
        backend = Backend({("GET", "/me"): (401, None)})
        async with backend.client() as client:
            with pytest.raises(AuthenticationError, match="invalid or expired"):
                await ApiAuthenticationService(client).validate_token("stale")
