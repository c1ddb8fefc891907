"""Domain layer for groupjoin.

Pure value types (users, roles, link rows) and the group-join evaluator.

Dependency rule: this package imports nothing from `groupjoin.*` outside
itself and no third-party libraries.
"""

from .group_join import index_links_by_role, roles_with_user_links
from .models import Role, User, UserRole

__all__ = [
    "Role",
    "User",
    "UserRole",
    "index_links_by_role",
    "roles_with_user_links",
]
