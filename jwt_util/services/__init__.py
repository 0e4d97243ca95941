"""Token services."""

from jwt_util.services.signature_verifier import verify, verify_token
from jwt_util.services.token_builder import build_token, resolve_signing_algorithm
from jwt_util.services.token_inspector import (
    check_claims,
    contains_token,
    evaluate_claims,
    get_claim,
    inspect_token,
)
from jwt_util.services.token_locator import (
    get_authorization_bearer_value,
    get_header_values,
    locate_token,
    locate_token_in_request,
)

__all__ = [
    "build_token",
    "check_claims",
    "contains_token",
    "evaluate_claims",
    "get_authorization_bearer_value",
    "get_claim",
    "get_header_values",
    "inspect_token",
    "locate_token",
    "locate_token_in_request",
    "resolve_signing_algorithm",
    "verify",
    "verify_token",
]
