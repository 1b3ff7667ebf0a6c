from __future__ import annotations

from typing import Any

from jose import jwt
from jose.exceptions import JWTError

from breedcheck.application.errors import AuthError


class JWTService:
    """Verifies access tokens issued by the external identity service."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience

    def decode(self, token: str) -> dict[str, Any]:
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc
        if claims.get("typ", "access") != "access":
            raise AuthError("Invalid access token")
        return claims
