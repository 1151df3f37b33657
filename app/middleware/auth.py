"""Authorization guards and the dependency that chains them.

A guard takes the in-flight request and its ``RequestContext`` and either
returns (pass) or raises a typed HTTP error (stop). ``require`` runs guards
left to right against a fresh context per request:

    AdminUser = require(authenticated, has_role(Role.ADMIN))

Guards that need a user fail with 401 when ``authenticated`` has not run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from bson import ObjectId
from fastapi import Request

from app.core.errors import Forbidden, Unauthenticated
from app.models.entities.user import AccountStatus, Role, User
from app.services.identity import IdentityResolver, VerifiedIdentity


@dataclass
class RequestContext:
    identity: Optional[VerifiedIdentity] = None
    user: Optional[User] = None


Guard = Callable[[Request, RequestContext], None]


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def authenticated(request: Request, context: RequestContext) -> None:
    resolver: IdentityResolver = request.app.state.identity_resolver
    token = bearer_token(request.headers.get("Authorization"))
    context.identity, context.user = resolver.resolve(token)


def has_role(*roles: Role) -> Guard:
    allowed = {Role(r).value for r in roles}
    label = " or ".join(sorted(allowed))

    def guard(request: Request, context: RequestContext) -> None:
        if context.user is None:
            raise Unauthenticated()
        if context.user.role not in allowed:
            raise Forbidden(f"Only {label} allowed")

    guard.__name__ = f"has_role({label})"
    return guard


def is_active(request: Request, context: RequestContext) -> None:
    if context.user is None:
        raise Unauthenticated()
    if context.user.status != AccountStatus.ACTIVE:
        raise Forbidden("Account not approved yet")


def require(*guards: Guard) -> Callable[[Request], RequestContext]:
    """Build a FastAPI dependency running ``guards`` in order."""

    def dependency(request: Request) -> RequestContext:
        context = RequestContext()
        for guard in guards:
            guard(request, context)
        request.state.auth = context
        return context

    return dependency


def ensure_owner_or_admin(owner_id: Optional[ObjectId], user: User) -> None:
    if user.is_admin:
        return
    if owner_id is None or str(owner_id) != str(user.id):
        raise Forbidden("Not allowed to modify this resource")


CurrentUser = require(authenticated)
ActiveUser = require(authenticated, is_active)
AdminUser = require(authenticated, has_role(Role.ADMIN))
ActiveMerchant = require(authenticated, has_role(Role.MERCHANT), is_active)
MerchantOrAdmin = require(authenticated, has_role(Role.MERCHANT, Role.ADMIN), is_active)
BlogAuthor = require(authenticated, has_role(Role.ADMIN, Role.VOLUNTEER), is_active)
