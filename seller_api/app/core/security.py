"""
Request identity helpers.

Authentication happens in the API gateway in front of this service.
The gateway forwards the authenticated user as two headers:

* ``X-User-ID``: positive integer user ID;
* ``X-User-Role``: one of the values of :class:`Role`.

``get_current_actor`` turns them into an :class:`Actor` and rejects
the request with 401 when they are missing or malformed.
``get_optional_actor`` is the variant for public endpoints that behave
differently for known users.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from ..models import Actor, Role


logger = logging.getLogger(__name__)


def _parse_actor(user_id: str, role: str) -> Actor:
    try:
        parsed_id = int(user_id)
    except ValueError:
        parsed_id = 0
    if parsed_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user ID",
        )
    try:
        parsed_role = Role(role.strip().lower())
    except ValueError:
        logger.warning("Rejected request with unknown role %r", role)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user role",
        ) from None
    return Actor(user_id=parsed_id, role=parsed_role)


def get_optional_actor(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> Optional[Actor]:
    """Return the caller if identity headers are present, else ``None``."""
    if x_user_id is None or x_user_role is None:
        return None
    return _parse_actor(x_user_id, x_user_role)


def get_current_actor(actor: Optional[Actor] = Depends(get_optional_actor)) -> Actor:
    """Dependency that requires an authenticated caller."""
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return actor
