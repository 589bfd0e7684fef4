"""
Infrastructure adapter: shared-secret JWT (python-jose) → ITokenValidator.

Validates HS256-signed bearer tokens issued by the identity service: signature,
expiry, and, when configured, audience and issuer.  The `sub` claim is required
because it is the user id handed to the notes and watchlist use cases.
"""

from typing import Optional

from jose import JWTError, jwt

from equityedge.domain.ports.token_validator_port import ITokenValidator


class JWTTokenValidator(ITokenValidator):
    """Validates bearer tokens signed with a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must be configured")
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience
        self._issuer = issuer

    def validate(self, token: str) -> dict:
        """Decode and validate a bearer token.

        Raises:
            ValueError: on any validation failure (bad signature, expiry,
                        wrong audience/issuer, missing sub).
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"verify_aud": self._audience is not None},
            )
        except JWTError as exc:
            raise ValueError(f"Token validation failed: {exc}") from exc

        if not claims.get("sub"):
            raise ValueError("Token has no subject claim.")
        return claims
