"""
Requesting identity.

The upstream gateway authenticates callers and forwards their user ID
and role; this service trusts both and builds an ``Actor`` per request.
"""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Closed set of roles known to the marketplace."""

    SUPERUSER = "superuser"
    CLIENT = "client"

    @property
    def is_superuser(self) -> bool:
        return self is Role.SUPERUSER


@dataclass(frozen=True)
class Actor:
    user_id: int
    role: Role
