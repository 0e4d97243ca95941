"""Exceptions raised by jwt-util.

Token problems (absent, malformed, bad signature) are reported through
return values, not exceptions. Only caller mistakes that cannot be
expressed as a result end up here.
"""

from typing import Iterable


class JWTUtilError(Exception):
    """Base exception for jwt-util errors."""


class UnsupportedAlgorithmError(JWTUtilError, ValueError):
    """Raised in strict mode when a signing algorithm name is not recognized.

    Attributes:
        algorithm: The rejected algorithm name
        supported: Names that would have been accepted
    """

    def __init__(self, algorithm: str, supported: Iterable[str]):
        self.algorithm = algorithm
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported signing algorithm {algorithm!r}; "
            f"expected one of {', '.join(self.supported)}"
        )
