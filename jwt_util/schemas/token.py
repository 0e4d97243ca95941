"""Result types for token inspection and verification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class TokenStatus(str, Enum):
    """Outcome of a token operation.

    Attributes:
        ABSENT: No token was supplied (not an error)
        VALID: Token parsed (unsafe inspection) or verified (signature check)
        MATCHED: Every expected claim equals the token's claim
        MISMATCHED: At least one expected claim is missing or different
        MALFORMED: Wrong segment count, bad base64url or bad JSON
        EXPIRED: Signature is fine but the token is past its 'exp'
        INVALID_SIGNATURE: Signature, key family or 'nbf' check failed
    """

    ABSENT = "absent"
    VALID = "valid"
    MATCHED = "matched"
    MISMATCHED = "mismatched"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"


@dataclass(frozen=True)
class TokenInspection:
    """Result of parsing a token without verifying it.

    ``header`` and ``claims`` are empty unless ``status`` is VALID.
    """

    status: TokenStatus
    header: Dict[str, Any] = field(default_factory=dict)
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.status is TokenStatus.VALID
