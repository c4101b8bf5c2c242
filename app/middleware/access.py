# app/middleware/access.py
"""
Request gates for the API.

Two stages exist: a logging stage that records who is calling and a
verification stage that requires a valid ``token`` cookie. Which stages
run for a route is decided by the policy tables below, so every gated
route is listed in one place. Routers attach the stages with
``dependencies=requires(method, path)``.
"""
import enum
import logging
from typing import Optional

from fastapi import Depends, Request

from app.core.config import Settings, get_app_settings, get_settings
from app.core.error_messages import ErrorResponses
from app.utils.auth_utils import TOKEN_COOKIE, verify_token

logger = logging.getLogger(__name__)


class Capability(str, enum.Enum):
    LOG = "log"
    IDENTITY = "identity"


ROUTE_POLICY = {
    ("POST", "/jwt"): frozenset(),
    ("POST", "/logout"): frozenset(),
    ("GET", "/services"): frozenset(),
    ("GET", "/services/{id}"): frozenset(),
    ("POST", "/checkouts"): frozenset(),
    ("GET", "/checkouts"): frozenset({Capability.LOG, Capability.IDENTITY}),
    # Reachable without a token unless ENFORCE_OWNERSHIP is on.
    ("DELETE", "/checkouts/{id}"): frozenset(),
    ("PATCH", "/checkouts/{id}"): frozenset(),
}

STRICT_ROUTE_POLICY = {
    **ROUTE_POLICY,
    ("DELETE", "/checkouts/{id}"): frozenset({Capability.LOG, Capability.IDENTITY}),
    ("PATCH", "/checkouts/{id}"): frozenset({Capability.LOG, Capability.IDENTITY}),
}


def active_policy(settings: Optional[Settings] = None) -> dict:
    if (settings or get_settings()).ENFORCE_OWNERSHIP:
        return STRICT_ROUTE_POLICY
    return ROUTE_POLICY


def policy_for(method: str, path: str, settings: Optional[Settings] = None) -> frozenset:
    try:
        return active_policy(settings)[(method.upper(), path)]
    except KeyError:
        raise LookupError(f"no access policy declared for {method} {path}") from None


def audit_policy(settings: Optional[Settings] = None) -> list[tuple[str, str, list[str]]]:
    """List every declared route with the stages that guard it."""
    return [
        (method, path, sorted(c.value for c in caps))
        for (method, path), caps in sorted(active_policy(settings).items())
    ]


async def log_request(request: Request) -> None:
    host = request.headers.get("host", "")
    logger.info("logger info: %s %s %s", request.method, request.url.path, host)


async def verify_token_cookie(request: Request) -> dict:
    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise ErrorResponses.UNAUTHORIZED

    claims = verify_token(token, get_app_settings(request))
    if claims is None:
        raise ErrorResponses.UNAUTHORIZED

    request.state.user = claims
    return claims


# Chain order: logging always runs before verification.
_STAGES = (
    (Capability.LOG, log_request),
    (Capability.IDENTITY, verify_token_cookie),
)


def requires(method: str, path: str) -> list:
    """
    Dependencies for a route. The policy is looked up per request so the
    ENFORCE_OWNERSHIP setting is honoured without re-registering routes.
    """
    policy_for(method, path)

    async def gate(request: Request) -> None:
        caps = policy_for(method, path, get_app_settings(request))
        for cap, stage in _STAGES:
            if cap in caps:
                await stage(request)

    return [Depends(gate)]


def current_user(request: Request):
    """Claims attached by the verification stage, or None on open routes."""
    return getattr(request.state, "user", None)
