"""Build compact JWTs from a claim set, signed with a shared secret or unsigned."""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, Union

import jwt

from jwt_util.core.config import settings
from jwt_util.core.exceptions import UnsupportedAlgorithmError
from jwt_util.core.security import HMAC_ALGORITHMS, UNSIGNED_ALGORITHM

logger = logging.getLogger(__name__)

Timestamp = Union[datetime, int, float]


def resolve_signing_algorithm(name: Optional[str], strict: Optional[bool] = None) -> str:
    """
    Map an algorithm name to a supported HMAC algorithm.

    Names are matched case-insensitively. A missing name gives the
    configured default. An unknown name (including asymmetric ones, which
    cannot sign with a secret) also gives the default and logs a warning,
    unless strict mode is on.

    Args:
        name: Requested algorithm name, e.g. "HS512"
        strict: Raise on unknown names (uses JWT_STRICT_ALGORITHM if not provided)

    Returns:
        JWA algorithm name

    Raises:
        UnsupportedAlgorithmError: If strict and the name is not recognized
    """
    default = settings.JWT_DEFAULT_ALGORITHM
    if not name:
        return default

    candidate = name.strip().upper()
    if candidate in HMAC_ALGORITHMS:
        return candidate

    if strict is None:
        strict = settings.JWT_STRICT_ALGORITHM
    if strict:
        raise UnsupportedAlgorithmError(name, HMAC_ALGORITHMS)

    logger.warning(
        "Unknown signing algorithm, falling back to default",
        extra={"requested_algorithm": name, "algorithm": default},
    )
    return default


def build_token(
    claims: Mapping[str, str],
    expires_at: Optional[Timestamp] = None,
    algorithm: Optional[str] = None,
    secret: Optional[str] = None,
    strict: Optional[bool] = None,
) -> str:
    """
    Create a compact JWT embedding *claims*.

    Args:
        claims: Top-level claims to embed (string values)
        expires_at: Expiration as a datetime or unix timestamp (optional)
        algorithm: HMAC algorithm name (default JWT_DEFAULT_ALGORITHM)
        secret: Shared secret; without one the token is unsigned
            (``alg: none`` and an empty signature segment)
        strict: See :func:`resolve_signing_algorithm`

    Returns:
        Compact token string

    Example:
        >>> token = build_token({"sub": "user-123"}, secret="s3cr3t")
    """
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {"iat": int(now.timestamp())}
    payload.update(claims)

    if expires_at is not None:
        payload["exp"] = expires_at if isinstance(expires_at, datetime) else int(expires_at)

    if secret is None:
        signing_algorithm = UNSIGNED_ALGORITHM
        token = jwt.encode(payload, None, algorithm=UNSIGNED_ALGORITHM)
    else:
        signing_algorithm = resolve_signing_algorithm(algorithm, strict)
        token = jwt.encode(payload, secret, algorithm=signing_algorithm)

    logger.debug(
        "JWT built",
        extra={
            "algorithm": signing_algorithm,
            "claims": sorted(claims),
            "expires": expires_at is not None,
        },
    )

    return token
