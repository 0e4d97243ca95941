"""
JWT signature verification against a public key or a shared secret.

The key type selects the verification path:
- ``str``/``bytes``: HMAC shared secret (HS256/HS384/HS512)
- RSA, EC, Ed25519/Ed448 public key objects from ``cryptography``

Keys arrive pre-parsed; no PEM/DER decoding happens here. Expiry and
not-before are enforced by PyJWT, audience and issuer are left to the
caller's policy layer.
"""

import logging
from typing import Any, Optional

import jwt
from jwt.exceptions import (
    ExpiredSignatureError,
    ImmatureSignatureError,
    InvalidAlgorithmError,
    InvalidKeyError,
    InvalidSignatureError,
    PyJWTError,
)

from jwt_util.core.config import settings
from jwt_util.core.security import algorithms_for_key
from jwt_util.schemas.token import TokenStatus

logger = logging.getLogger(__name__)

# Claims outside the signature check are not this module's concern
VERIFY_OPTIONS = {
    "verify_signature": True,
    "verify_exp": True,
    "verify_nbf": True,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


def verify_token(token: Optional[str], key: Any) -> TokenStatus:
    """
    Verify the signature of a compact JWT.

    Args:
        token: Encoded JWT (header.payload.signature), or None
        key: HMAC secret string/bytes or a cryptography public key object

    Returns:
        ABSENT, VALID, EXPIRED, INVALID_SIGNATURE or MALFORMED
    """
    if token is None:
        return TokenStatus.ABSENT

    algorithms = algorithms_for_key(key)
    if algorithms is None:
        logger.warning(
            "Unsupported verification key type",
            extra={"key_type": type(key).__name__},
        )
        return TokenStatus.INVALID_SIGNATURE

    try:
        jwt.decode(
            token,
            key=key,
            algorithms=algorithms,
            options=VERIFY_OPTIONS,
            leeway=settings.JWT_LEEWAY_SECONDS,
        )
    except ExpiredSignatureError:
        logger.info("JWT has expired")
        return TokenStatus.EXPIRED
    except (
        InvalidSignatureError,
        InvalidAlgorithmError,
        InvalidKeyError,
        ImmatureSignatureError,
    ) as e:
        logger.info(
            "JWT signature validation failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        return TokenStatus.INVALID_SIGNATURE
    except (PyJWTError, ValueError, TypeError) as e:
        logger.info(
            "JWT could not be decoded for verification",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        return TokenStatus.MALFORMED

    return TokenStatus.VALID


def verify(token: Optional[str], key: Any) -> bool:
    """Return True only if the token's signature checks out with ``key``."""
    return verify_token(token, key) is TokenStatus.VALID
