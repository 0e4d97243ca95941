"""
Locate the encoded JWT carried by an HTTP request.

Two conventions are supported, in order:
1. A custom header holding the whole token (e.g. ``X-Auth-Token: <jwt>``)
2. The standard ``Authorization: Bearer <jwt>`` header

Absence is a normal outcome and is reported as ``None``.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from jwt_util.core.config import settings

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "bearer"


def get_header_values(headers: Any, name: str) -> List[str]:
    """
    Return every value of a header, matching the name case-insensitively.

    Args:
        headers: Starlette ``Headers`` (or anything with ``getlist``), or a
            mapping of header name to a string or a list of strings
        name: Header name

    Returns:
        List of raw header values in request order (empty if absent)
    """
    if hasattr(headers, "getlist"):
        return list(headers.getlist(name))

    values: List[str] = []
    if not isinstance(headers, Mapping):
        return values

    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() != wanted:
            continue
        if isinstance(value, (list, tuple)):
            values.extend(value)
        else:
            values.append(value)
    return values


def get_authorization_bearer_value(headers: Any) -> Optional[str]:
    """
    Extract the token from ``Authorization: Bearer XXXX``.

    The prefix match is case-insensitive and the remainder is stripped of
    surrounding whitespace. The first qualifying value wins.
    """
    for value in get_header_values(headers, AUTHORIZATION_HEADER):
        if value.lower().startswith(BEARER_PREFIX):
            return value[len(BEARER_PREFIX):].strip()
    return None


def locate_token(headers: Any, header_name: Optional[str] = None) -> Optional[str]:
    """
    Find the encoded JWT in a header collection.

    Args:
        headers: Request headers (see :func:`get_header_values`)
        header_name: Custom header to check first (uses JWT_HEADER_NAME if
            not provided; an empty name skips the custom header)

    Returns:
        The raw token string, or None if no token is present

    Example:
        >>> locate_token({"Authorization": "Bearer aaa.bbb.ccc"})
        'aaa.bbb.ccc'
    """
    if header_name is None:
        header_name = settings.JWT_HEADER_NAME

    if header_name:
        values = get_header_values(headers, header_name)
        if values:
            # Custom headers carry the bare token, no prefix stripping
            return values[0]

    token = get_authorization_bearer_value(headers)
    if token is None:
        logger.debug(
            "No JWT found in request headers",
            extra={"header_name": header_name or AUTHORIZATION_HEADER},
        )
    return token


def locate_token_in_request(request: Any, header_name: Optional[str] = None) -> Optional[str]:
    """Find the encoded JWT in a Starlette/FastAPI request."""
    return locate_token(request.headers, header_name)
