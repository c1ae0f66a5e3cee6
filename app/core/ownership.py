"""
Ownership guard for mutating reviews and comments.
Existence is checked before ownership: a missing resource is 404 for every caller,
an existing one owned by someone else is 403.
"""

import logging
from typing import Protocol, TypeVar

from app.core.errors import AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)


class Owned(Protocol):
    id: int
    user_id: int


OwnedT = TypeVar("OwnedT", bound=Owned)


def ensure_owner(
    resource: OwnedT | None,
    user_id: int,
    *,
    resource_name: str,
    action: str,
    not_found_message: str,
) -> OwnedT:
    """Return the resource if `user_id` authored it, else raise NotFoundError / AuthorizationError."""
    if resource is None:
        raise NotFoundError(not_found_message)
    if resource.user_id != user_id:
        logger.warning(
            "Denied %s of %s %s",
            action,
            resource_name,
            resource.id,
            extra={"user_id": user_id, "resource": resource_name, "resource_id": resource.id},
        )
        raise AuthorizationError(f"You are not authorized to {action} this {resource_name}.")
    return resource
