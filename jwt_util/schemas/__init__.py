"""Result schemas."""

from jwt_util.schemas.token import TokenInspection, TokenStatus

__all__ = ["TokenInspection", "TokenStatus"]
