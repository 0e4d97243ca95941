"""
Unsafe token inspection and claim checks.

Everything in this module parses the token WITHOUT verifying its
signature: the signature segment is removed and only the header and
payload are decoded. A positive result proves the token is well-formed,
never that it is authentic. Use
:mod:`jwt_util.services.signature_verifier` for that.

Each check comes in two forms:
- a tagged form returning :class:`TokenStatus`, so callers can tell an
  absent token from a malformed one or a claim mismatch
- a compatibility form returning bool/str/None, where those cases collapse
  and the details only reach the logs
"""

import logging
from collections.abc import Mapping
from typing import Optional

from jwt.exceptions import PyJWTError

from jwt_util.core.security import (
    get_unverified_jwt_claims,
    get_unverified_jwt_header,
    remove_signature,
)
from jwt_util.schemas.token import TokenInspection, TokenStatus

logger = logging.getLogger(__name__)


def inspect_token(token: Optional[str]) -> TokenInspection:
    """
    Parse header and claims of a token without verifying it.

    Args:
        token: Encoded JWT, or None when no token was found

    Returns:
        TokenInspection with status ABSENT, VALID or MALFORMED
    """
    if token is None:
        return TokenInspection(status=TokenStatus.ABSENT)

    unsigned = remove_signature(token)
    try:
        header = get_unverified_jwt_header(unsigned)
        claims = get_unverified_jwt_claims(unsigned)
    except (PyJWTError, ValueError, TypeError) as e:
        logger.warning(
            "Unable to parse JWT without verification",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        return TokenInspection(status=TokenStatus.MALFORMED)

    return TokenInspection(status=TokenStatus.VALID, header=header, claims=claims)


def contains_token(token: Optional[str]) -> bool:
    """Return True if ``token`` is present and syntactically well-formed."""
    return inspect_token(token).is_valid


def get_claim(token: Optional[str], claim_name: str) -> Optional[str]:
    """
    Read one string claim from a token without verifying it.

    Args:
        token: Encoded JWT (None or empty string yields None)
        claim_name: Name of the claim

    Returns:
        The claim value, or None if the token is absent or malformed, the
        claim is missing, or its value is not a string
    """
    if not token:
        return None

    inspection = inspect_token(token)
    if not inspection.is_valid:
        return None

    value = inspection.claims.get(claim_name)
    if value is not None and not isinstance(value, str):
        logger.warning(
            "JWT claim is not a string",
            extra={"claim": claim_name, "claim_type": type(value).__name__},
        )
        return None
    return value


def evaluate_claims(token: Optional[str], expected: Mapping[str, str]) -> TokenStatus:
    """
    Compare expected claim values against the token's claims.

    Every expected value must equal the actual claim exactly, and the
    actual claim must be a string. Comparison stops at the first mismatch.

    Args:
        token: Encoded JWT, or None when no token was found
        expected: Mapping of claim name to expected string value

    Returns:
        ABSENT, MALFORMED, MISMATCHED or MATCHED (an empty mapping matches)
    """
    inspection = inspect_token(token)
    if inspection.status is not TokenStatus.VALID:
        return inspection.status

    for name, expected_value in expected.items():
        actual = inspection.claims.get(name)
        if not isinstance(actual, str) or actual != expected_value:
            logger.info(
                "JWT claim does not match expected value",
                extra={"claim": name},
            )
            return TokenStatus.MISMATCHED

    return TokenStatus.MATCHED


def check_claims(token: Optional[str], expected: Mapping[str, str]) -> bool:
    """
    Boolean form of :func:`evaluate_claims`.

    An absent token passes: callers that need a token to be present must
    check :func:`contains_token` first or use :func:`evaluate_claims`.
    """
    return evaluate_claims(token, expected) in (TokenStatus.ABSENT, TokenStatus.MATCHED)
