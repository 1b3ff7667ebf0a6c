from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from uuid import UUID

from breedcheck.application.errors import AuthError, PermissionDenied
from breedcheck.domain.value_objects.role import Role


@dataclass(slots=True)
class AuthContext:
    user_id: UUID
    role: Role
    claims: dict[str, Any]


def context_from_claims(claims: Mapping[str, Any]) -> AuthContext:
    subject = claims.get("sub")
    if not subject:
        raise AuthError("Token missing subject")
    try:
        user_id = UUID(str(subject))
    except ValueError as exc:
        raise AuthError("Token subject is not a valid UUID") from exc
    # Tokens without a role claim get the least privileged role
    raw_role = str(claims.get("role") or Role.BREEDER.value).upper()
    try:
        role = Role(raw_role)
    except ValueError as exc:
        raise PermissionDenied("Unknown role in token") from exc
    return AuthContext(user_id=user_id, role=role, claims=dict(claims))
