"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import (
    AuthDecision,
    CurrentUser,
    RouteAccess,
    auth_gate,
    authorize,
    extract_token,
    get_current_claims,
    protected_route,
    public_route,
)
from app.dependencies.services import (
    get_auth_service,
    get_profile_service,
    get_user_repository,
)

__all__ = [
    "AuthDecision",
    "CurrentUser",
    "RouteAccess",
    "auth_gate",
    "authorize",
    "extract_token",
    "get_current_claims",
    "protected_route",
    "public_route",
    "get_auth_service",
    "get_profile_service",
    "get_user_repository",
]
