"""Extract, inspect, verify and build JWTs carried in HTTP request headers."""

from jwt_util.core.exceptions import JWTUtilError, UnsupportedAlgorithmError
from jwt_util.schemas.token import TokenInspection, TokenStatus
from jwt_util.services.signature_verifier import verify, verify_token
from jwt_util.services.token_builder import build_token, resolve_signing_algorithm
from jwt_util.services.token_inspector import (
    check_claims,
    contains_token,
    evaluate_claims,
    get_claim,
    inspect_token,
)
from jwt_util.services.token_locator import locate_token, locate_token_in_request

__version__ = "0.1.0"

__all__ = [
    "JWTUtilError",
    "UnsupportedAlgorithmError",
    "TokenInspection",
    "TokenStatus",
    "build_token",
    "check_claims",
    "contains_token",
    "evaluate_claims",
    "get_claim",
    "inspect_token",
    "locate_token",
    "locate_token_in_request",
    "resolve_signing_algorithm",
    "verify",
    "verify_token",
]
