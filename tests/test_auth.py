"""
Test Authorization Mapping and Token Validation
"""
import pytest
from portfolio.modules.exceptions import AccessDeniedError
from portfolio.modules.users.auth.middleware import require_admin, require_authority
from portfolio.modules.users.auth.roles import ADMIN, roles_from_token


def test_roles_from_token_prefixes_realm_roles():
    """Each realm role becomes ROLE_<name>."""
    claims = {"realm_access": {"roles": ["ADMIN", "client"]}}
    assert roles_from_token(claims) == {"ROLE_ADMIN", "ROLE_client"}


@pytest.mark.parametrize("claims", [
    {},
    {"realm_access": None},
    {"realm_access": "ADMIN"},
    {"realm_access": {}},
    {"realm_access": {"roles": "ADMIN"}},
    {"realm_access": {"roles": None}},
])
def test_roles_from_token_malformed_shapes_yield_nothing(claims):
    assert roles_from_token(claims) == set()


def test_roles_from_token_ignores_non_string_roles():
    claims = {"realm_access": {"roles": ["ADMIN", 7, None]}}
    assert roles_from_token(claims) == {ADMIN}


def test_roles_from_token_ignores_resource_access():
    claims = {"resource_access": {"portfolio-service": {"roles": ["ADMIN"]}}}
    assert roles_from_token(claims) == set()


@pytest.mark.asyncio
async def test_require_authority_passes_when_present():
    guard = require_authority("ROLE_EDITOR")
    authorities = {"ROLE_EDITOR", "ROLE_client"}
    assert await guard(authorities=authorities) == authorities


@pytest.mark.asyncio
async def test_require_admin_rejects_missing_authority():
    with pytest.raises(AccessDeniedError):
        await require_admin(authorities={"ROLE_client"})


def test_token_verifier_returns_claims(token_verifier, make_token):
    claims = token_verifier.decode(make_token(["ADMIN"]))
    assert claims["realm_access"]["roles"] == ["ADMIN"]
    assert claims["sub"] == "user-1"


def test_token_verifier_rejects_expired_token(token_verifier, make_token):
    with pytest.raises(AccessDeniedError, match="expired"):
        token_verifier.decode(make_token(["ADMIN"], expires_in=-60))


def test_token_verifier_rejects_wrong_signature(token_verifier, make_token):
    forged = make_token(["ADMIN"], key="some-other-signing-key-0123456789abcdef")
    with pytest.raises(AccessDeniedError):
        token_verifier.decode(forged)


def test_token_verifier_rejects_garbage(token_verifier):
    with pytest.raises(AccessDeniedError):
        token_verifier.decode("not-a-jwt")
