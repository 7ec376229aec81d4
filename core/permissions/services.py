"""
Service layer for permission checking.
Consults the static matrix in core.permissions.matrix.
"""
from typing import FrozenSet, Iterable, Optional

from core.base.exceptions import Forbidden, Unauthenticated
from core.user_accounts.identity import Identity

from .matrix import METHOD_ACTIONS, PERMISSION_MATRIX, Actions


def required_roles(resource: str, action: str) -> FrozenSet[str]:
    """
    Roles allowed to perform `action` on `resource`.

    Unknown resources or actions resolve to an empty set, so a typo in a
    view denies access instead of opening it.
    """
    return PERMISSION_MATRIX.get(resource, {}).get(action, frozenset())


def can_perform(role: Optional[str], resource: str, action: str) -> bool:
    return role in required_roles(resource, action)


def action_for_method(http_method: str) -> str:
    return METHOD_ACTIONS.get(http_method.upper(), Actions.VIEW)


def authorize(identity: Optional[Identity], allowed_roles: Iterable[str]) -> Identity:
    """
    Allow or deny a caller.

    Raises:
        Unauthenticated: no identity was resolved for the request
        Forbidden: the caller's role is not in allowed_roles
    """
    if identity is None:
        raise Unauthenticated()
    if identity.role not in allowed_roles:
        raise Forbidden()
    return identity


def authorize_action(identity: Optional[Identity], resource: str, action: str) -> Identity:
    return authorize(identity, required_roles(resource, action))


def ensure_owner(identity: Identity, owner_id, detail=None) -> None:
    """Deny unless the caller owns the resource."""
    if str(identity.user_id) != str(owner_id):
        raise Forbidden(detail or 'You can only access your own data.')
