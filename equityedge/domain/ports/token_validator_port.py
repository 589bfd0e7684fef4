"""
Port (interface) for bearer-token validators.
Infrastructure adapters (e.g. JWTTokenValidator) must implement this interface.
"""

from abc import ABC, abstractmethod


class ITokenValidator(ABC):
    @abstractmethod
    def validate(self, token: str) -> dict:
        """Validate a token and return its decoded claims.

        Raises:
            ValueError: if the token is malformed, expired, badly signed, or
                        fails audience/issuer checks.
        """
        ...
