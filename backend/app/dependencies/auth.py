"""
Authentication gate for route protection.

Every route declares its access level explicitly through ``auth_gate``;
the default is protected.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Callable, Optional

from fastapi import Depends, HTTPException, Request, status

from app.core.exceptions import InvalidTokenError
from app.core.security import TokenService, get_token_service
from app.schemas.auth import TokenPayload

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "jwt"


class RouteAccess(str, Enum):
    """Access level of a route."""
    PUBLIC = "public"
    PROTECTED = "protected"


@dataclass
class AuthDecision:
    """Outcome of the gate for one request."""
    allowed: bool
    claims: Optional[TokenPayload] = None
    # Internal only, never sent to the caller
    reason: Optional[str] = None


def extract_token(request: Request) -> Optional[str]:
    """
    Find the session token on a request.

    Looks for ``Authorization: Bearer <token>`` first, then the ``jwt`` cookie.
    """
    authorization = request.headers.get("Authorization")
    if authorization:
        parts = authorization.split(" ")
        if parts[0] == "Bearer" and len(parts) > 1 and parts[1]:
            return parts[1]
    return request.cookies.get(TOKEN_COOKIE) or None


def authorize(
    request: Request,
    access: RouteAccess,
    token_service: TokenService,
) -> AuthDecision:
    """Decide whether a request may proceed."""
    if access == RouteAccess.PUBLIC:
        return AuthDecision(allowed=True)

    token = extract_token(request)
    if token is None:
        return AuthDecision(allowed=False, reason="missing token")

    try:
        payload = token_service.verify(token)
    except InvalidTokenError as e:
        return AuthDecision(allowed=False, reason=str(e))

    return AuthDecision(allowed=True, claims=TokenPayload(**payload))


def auth_gate(access: RouteAccess = RouteAccess.PROTECTED) -> Callable:
    """
    Dependency factory enforcing the access level of a route.

    Usage:
        @router.get("/private", dependencies=[Depends(auth_gate())])
        @router.post("/login", dependencies=[Depends(auth_gate(RouteAccess.PUBLIC))])

    Denials are answered with a generic 401 whatever the cause.
    """
    async def gate(
        request: Request,
        token_service: TokenService = Depends(get_token_service),
    ) -> AuthDecision:
        decision = authorize(request, access, token_service)
        if not decision.allowed:
            logger.debug("Denied %s %s: %s", request.method, request.url.path, decision.reason)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized",
                headers={"WWW-Authenticate": "Bearer"},
            )
        request.state.user = decision.claims
        return decision

    return gate


public_route = auth_gate(RouteAccess.PUBLIC)
protected_route = auth_gate(RouteAccess.PROTECTED)


async def get_current_claims(
    decision: Annotated[AuthDecision, Depends(protected_route)],
) -> TokenPayload:
    """Dependency returning the claims of the authenticated caller."""
    return decision.claims


# Type alias for cleaner route signatures
CurrentUser = Annotated[TokenPayload, Depends(get_current_claims)]
