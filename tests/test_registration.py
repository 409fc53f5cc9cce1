"""
Test Keycloak Registration Flow

The admin REST API is replaced by an httpx.MockTransport that records every
request it receives.
"""
import json
import httpx
import pytest
from portfolio.modules.config import KeycloakSettings
from portfolio.modules.exceptions import IdentityProviderError
from portfolio.modules.users.domain.account import NewAccount
from portfolio.modules.users.services import KeycloakAdminClient, UserRegistrationService

BASE = "http://keycloak.test"
USER_ID = "8f2c1d7e-0000-4000-8000-000000000001"

TOKEN_URL = f"{BASE}/realms/master/protocol/openid-connect/token"
USERS_URL = f"{BASE}/admin/realms/portfolio/users"
ROLES_URL = f"{BASE}/admin/realms/portfolio/roles"
MAPPING_URL = f"{USERS_URL}/{USER_ID}/role-mappings/realm"
USER_URL = f"{USERS_URL}/{USER_ID}"

ROLES = [
    {"id": "r-1", "name": "default-roles-portfolio"},
    {"id": "r-2", "name": "client"},
    {"id": "r-3", "name": "ADMIN"},
]


class FakeKeycloak:
    """Routes requests to canned responses and remembers the call order."""

    def __init__(self, overrides=None):
        self.calls = []
        self.overrides = overrides or {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        key = (request.method, str(request.url))
        self.calls.append(key)
        if key in self.overrides:
            return self.overrides[key](request)
        if key == ("POST", TOKEN_URL):
            return httpx.Response(200, json={"access_token": "admin-token", "expires_in": 60})
        if key == ("POST", USERS_URL):
            return httpx.Response(201, headers={"Location": USER_URL})
        if key == ("GET", ROLES_URL):
            return httpx.Response(200, json=ROLES)
        if key == ("POST", MAPPING_URL):
            return httpx.Response(204)
        if key == ("DELETE", USER_URL):
            return httpx.Response(204)
        return httpx.Response(404, text="unexpected")


def _settings(**overrides):
    values = dict(
        server_url=BASE,
        realm="portfolio",
        admin_username="admin",
        admin_password="secret",
    )
    values.update(overrides)
    return KeycloakSettings(**values)


def _service(fake, **settings):
    config = _settings(**settings)
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
    return UserRegistrationService(
        settings=config,
        admin_client=KeycloakAdminClient(config, client=client),
    )


def _account():
    return NewAccount(
        username="jdoe",
        email="jdoe@example.com",
        first_name="John",
        last_name="Doe",
        password="s3cretpass",
    )


@pytest.mark.asyncio
async def test_register_user_calls_keycloak_in_order():
    """Token, create, role lookup, role assignment, in that order."""
    fake = FakeKeycloak()

    user_id = await _service(fake).register_user(_account())

    assert user_id == USER_ID
    assert fake.calls == [
        ("POST", TOKEN_URL),
        ("POST", USERS_URL),
        ("GET", ROLES_URL),
        ("POST", MAPPING_URL),
    ]


@pytest.mark.asyncio
async def test_register_user_sends_expected_payloads():
    seen = {}

    def capture(name, response):
        def handler(request):
            seen[name] = request
            return response
        return handler

    fake = FakeKeycloak({
        ("POST", TOKEN_URL): capture("token", httpx.Response(200, json={"access_token": "tok"})),
        ("POST", USERS_URL): capture("create", httpx.Response(201, headers={"Location": USER_URL})),
        ("POST", MAPPING_URL): capture("assign", httpx.Response(204)),
    })

    await _service(fake).register_user(_account())

    form = dict(httpx.QueryParams(seen["token"].content.decode()))
    assert form == {
        "grant_type": "password",
        "client_id": "admin-cli",
        "username": "admin",
        "password": "secret",
    }

    created = json.loads(seen["create"].content)
    assert seen["create"].headers["Authorization"] == "Bearer tok"
    assert created["username"] == "jdoe"
    assert created["firstName"] == "John"
    assert created["enabled"] is True
    assert created["emailVerified"] is True
    assert created["credentials"] == [{"type": "password", "value": "s3cretpass", "temporary": False}]

    assert json.loads(seen["assign"].content) == [{"id": "r-2", "name": "client"}]


@pytest.mark.asyncio
async def test_create_conflict_stops_before_role_calls():
    fake = FakeKeycloak({
        ("POST", USERS_URL): lambda request: httpx.Response(
            409, json={"errorMessage": "User exists with same username"}
        ),
    })

    with pytest.raises(IdentityProviderError) as exc_info:
        await _service(fake).register_user(_account())

    assert exc_info.value.status_code == 409
    assert "User exists with same username" in exc_info.value.message
    assert exc_info.value.message.startswith("User registration failed: Client error when creating user")
    assert ("GET", ROLES_URL) not in fake.calls
    assert ("POST", MAPPING_URL) not in fake.calls


@pytest.mark.asyncio
async def test_created_without_location_header_fails():
    fake = FakeKeycloak({
        ("POST", USERS_URL): lambda request: httpx.Response(201),
    })

    with pytest.raises(IdentityProviderError, match="location header not found"):
        await _service(fake).register_user(_account())
    assert ("GET", ROLES_URL) not in fake.calls


@pytest.mark.asyncio
async def test_missing_role_lists_available_roles():
    fake = FakeKeycloak()

    with pytest.raises(IdentityProviderError) as exc_info:
        await _service(fake, registration_role="customer").register_user(_account())

    message = exc_info.value.message
    assert "Role 'customer' not found" in message
    assert "default-roles-portfolio, client, ADMIN" in message
    assert ("POST", MAPPING_URL) not in fake.calls


@pytest.mark.asyncio
async def test_token_without_access_token_fails():
    fake = FakeKeycloak({
        ("POST", TOKEN_URL): lambda request: httpx.Response(200, json={"token_type": "Bearer"}),
    })

    with pytest.raises(IdentityProviderError, match="Access token not found in response"):
        await _service(fake).register_user(_account())
    assert fake.calls == [("POST", TOKEN_URL)]


@pytest.mark.asyncio
async def test_token_rejected_carries_upstream_status():
    fake = FakeKeycloak({
        ("POST", TOKEN_URL): lambda request: httpx.Response(
            401, json={"error": "invalid_grant"}
        ),
    })

    with pytest.raises(IdentityProviderError) as exc_info:
        await _service(fake).register_user(_account())
    assert exc_info.value.status_code == 401
    assert "invalid_grant" in exc_info.value.body


@pytest.mark.asyncio
async def test_role_failure_leaves_account_when_rollback_disabled():
    fake = FakeKeycloak({
        ("POST", MAPPING_URL): lambda request: httpx.Response(500, text="boom"),
    })

    with pytest.raises(IdentityProviderError, match="Server error when assigning role"):
        await _service(fake).register_user(_account())
    assert ("DELETE", USER_URL) not in fake.calls


@pytest.mark.asyncio
async def test_role_failure_deletes_account_when_rollback_enabled():
    fake = FakeKeycloak({
        ("POST", MAPPING_URL): lambda request: httpx.Response(500, text="boom"),
    })

    with pytest.raises(IdentityProviderError, match="assigning role"):
        await _service(fake, rollback_on_failure=True).register_user(_account())
    assert fake.calls[-1] == ("DELETE", USER_URL)


@pytest.mark.asyncio
async def test_failed_rollback_still_raises_role_lookup_failure():
    fake = FakeKeycloak({
        ("GET", ROLES_URL): lambda request: httpx.Response(503, text="unavailable"),
        ("DELETE", USER_URL): lambda request: httpx.Response(500, text="also broken"),
    })

    with pytest.raises(IdentityProviderError) as exc_info:
        await _service(fake, rollback_on_failure=True).register_user(_account())
    assert "fetching roles" in exc_info.value.message
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(IdentityProviderError, match="HTTP error when getting admin token"):
        await _service(refuse).register_user(_account())


def test_new_account_repr_hides_password():
    assert "s3cretpass" not in repr(_account())
