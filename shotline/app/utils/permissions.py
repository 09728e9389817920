from collections import namedtuple

from werkzeug.exceptions import Forbidden

ADMIN_ROLE = "admin"
MEMBER_ROLE = "member"

VIEWER = "viewer"
CONTRIBUTOR = "contributor"
OWNER = "owner"

PROJECT_ROLE_RANKS = {
    VIEWER: 1,
    CONTRIBUTOR: 2,
    OWNER: 3,
}

UserContext = namedtuple("UserContext", ["user_id", "global_role"])


class PermissionDenied(Forbidden):
    pass


def get_role_rank(role):
    """
    Return the rank of given project role. Unknown roles rank below viewers.
    """
    if role is None:
        return 0
    return PROJECT_ROLE_RANKS.get(getattr(role, "code", role), 0)


def is_admin(user_context):
    """
    Return True if given user context comes from a studio administrator.
    """
    return user_context is not None and user_context.global_role == ADMIN_ROLE


def check_admin_permissions(user_context):
    """
    Return True if user is admin. It raises a PermissionDenied exception in case
    of failure.
    """
    if is_admin(user_context):
        return True
    else:
        raise PermissionDenied
