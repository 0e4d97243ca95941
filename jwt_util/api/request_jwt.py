"""
Request-level JWT helpers for Starlette/FastAPI applications.

Each helper locates the token in the request first (custom header, then
``Authorization: Bearer``) and hands it to the matching service. Results
are plain booleans/strings; use the services directly for the tagged
:class:`TokenStatus` results.

Usage:
    >>> from jwt_util.api.request_jwt import check_signature
    >>>
    >>> @app.get("/protected")
    >>> async def protected(request: Request):
    ...     if not check_signature(request, "X-Auth-Token", SHARED_SECRET):
    ...         raise HTTPException(status_code=401)
"""

from collections.abc import Callable, Mapping
from typing import Any, Optional

from starlette.requests import Request

from jwt_util.services.signature_verifier import verify
from jwt_util.services.token_inspector import check_claims, contains_token, get_claim
from jwt_util.services.token_locator import locate_token_in_request


def contains_valid_unsafe_jwt(request: Request, header_name: Optional[str] = None) -> bool:
    """Return True if the request carries a well-formed (unverified) JWT."""
    return contains_token(locate_token_in_request(request, header_name))


def check_payload_values(
    request: Request,
    header_name: Optional[str],
    claims_to_check: Mapping[str, str],
) -> bool:
    """
    Check claim values of the request's JWT without verifying it.

    A request without a token passes.
    """
    return check_claims(locate_token_in_request(request, header_name), claims_to_check)


def get_payload_value(
    request: Request,
    header_name: Optional[str],
    claim_name: str,
) -> Optional[str]:
    """Return one string claim of the request's JWT, or None."""
    return get_claim(locate_token_in_request(request, header_name), claim_name)


def check_signature(request: Request, header_name: Optional[str], key: Any) -> bool:
    """
    Verify the request's JWT with a public key object or a shared secret.

    Returns False when the request carries no token.
    """
    return verify(locate_token_in_request(request, header_name), key)


def jwt_token_dependency(header_name: Optional[str] = None) -> Callable[[Request], Optional[str]]:
    """
    Build a FastAPI dependency yielding the request's encoded JWT (or None).

    Example:
        >>> RequestToken = Annotated[Optional[str], Depends(jwt_token_dependency("X-Auth-Token"))]
        >>>
        >>> @app.get("/me")
        >>> async def me(token: RequestToken):
        ...     return {"sub": get_claim(token, "sub")}
    """

    def get_request_token(request: Request) -> Optional[str]:
        return locate_token_in_request(request, header_name)

    return get_request_token
