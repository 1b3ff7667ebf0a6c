from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    BREEDER = "BREEDER"

    def can_manage_policy(self) -> bool:
        return self is Role.ADMIN
