"""
Security utilities for JWT parsing and key handling.

This module wraps the PyJWT calls shared by the services: stripping the
signature segment, parsing header and claims without verification, and
mapping a verification key to the algorithms it may verify.
"""

from typing import Any, Dict, List, Optional

import jwt
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")
RSA_ALGORITHMS = ("RS256", "RS384", "RS512", "PS256", "PS384", "PS512")
EC_ALGORITHMS = ("ES256", "ES384", "ES512")
OKP_ALGORITHMS = ("EdDSA",)

UNSIGNED_ALGORITHM = "none"


def remove_signature(token: str) -> str:
    """
    Drop the signature segment of a compact JWT.

    Everything after the last '.' is removed and the dot itself is kept,
    so ``header.payload.signature`` becomes ``header.payload.``. A string
    without any dot becomes the empty string.

    Example:
        >>> remove_signature("aaa.bbb.ccc")
        'aaa.bbb.'
    """
    return token[: token.rfind(".") + 1]


def get_unverified_jwt_header(token: str) -> Dict[str, Any]:
    """
    Extract JWT header without verification.

    Args:
        token: JWT token string (format: header.payload.signature)

    Returns:
        Decoded JWT header dictionary containing fields like 'alg', 'typ'

    Raises:
        jwt.DecodeError: If token format is invalid or cannot be decoded
    """
    return jwt.get_unverified_header(token)


def get_unverified_jwt_claims(token: str) -> Dict[str, Any]:
    """
    Extract JWT claims (payload) without verification.

    Signature, expiry and every other registered claim check are disabled.
    NEVER trust these claims for authorization on their own.

    Args:
        token: JWT token string, signed or with an empty signature segment

    Returns:
        Decoded JWT payload dictionary

    Raises:
        jwt.DecodeError: If token format is invalid or cannot be decoded
    """
    return jwt.decode(token, options={"verify_signature": False})


def algorithms_for_key(key: Any) -> Optional[List[str]]:
    """
    Return the algorithms a verification key is allowed to check.

    Restricting the list to the key's own family prevents an attacker from
    choosing the algorithm through the token header (for example HS256
    signed with an RSA public key used as an HMAC secret).

    Args:
        key: Raw secret (str or bytes) or a cryptography public key object

    Returns:
        List of JWA algorithm names, or None for unsupported key types
    """
    if isinstance(key, (str, bytes)):
        return list(HMAC_ALGORITHMS)
    if isinstance(key, rsa.RSAPublicKey):
        return list(RSA_ALGORITHMS)
    if isinstance(key, ec.EllipticCurvePublicKey):
        return list(EC_ALGORITHMS)
    if isinstance(key, (ed25519.Ed25519PublicKey, ed448.Ed448PublicKey)):
        return list(OKP_ALGORITHMS)
    return None
