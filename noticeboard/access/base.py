"""Access result type and helpers for applying predicates to queries."""

from typing import Callable, Optional, Union

from sqlalchemy import true, false
from sqlalchemy.sql.elements import ColumnElement

from noticeboard.models.user import User
from noticeboard.utils.exceptions import APIException, UnauthorizedError, InsufficientPermissionsError

# True = unrestricted, False = denied, clause = rows the requester may touch
AccessResult = Union[bool, ColumnElement[bool]]
AccessPredicate = Callable[[Optional[User]], AccessResult]


def as_clause(access: AccessResult) -> ColumnElement[bool]:
    """Turn an access result into a WHERE clause."""
    if access is True:
        return true()
    if access is False:
        return false()
    return access


def access_denied(user: Optional[User], action: str) -> APIException:
    """Exception for a denied operation: 401 when anonymous, 403 otherwise."""
    if user is None:
        return UnauthorizedError(f"Authentication required to {action}")
    return InsufficientPermissionsError(action)


def ensure_allowed(access: AccessResult, user: Optional[User], action: str) -> AccessResult:
    """
    Reject an operation whose predicate evaluated to False.

    Returns the access result unchanged so callers can apply a filter.

    Raises:
        UnauthorizedError: If access is False and the requester is anonymous
        InsufficientPermissionsError: If access is False for an authenticated user
    """
    if access is False:
        raise access_denied(user, action)
    return access
