"""Application session – the signed-in user as an explicit value."""
from __future__ import annotations

import dataclasses
from datetime import datetime

from catalog_query.kernel.time import utc_now

ADMIN_ROLES: frozenset[str] = frozenset({"admin", "super_admin"})


@dataclasses.dataclass(frozen=True)
class Session:
    """Authenticated storefront or dashboard session."""
    user_id: str
    roles: frozenset[str] = frozenset()
    locale: str = "vi"
    started_at: datetime = dataclasses.field(default_factory=utc_now)

    @property
    def is_admin(self) -> bool:
        return bool(self.roles & ADMIN_ROLES)

    def has_role(self, role: str) -> bool:
        return role in self.roles


__all__ = ["ADMIN_ROLES", "Session"]
