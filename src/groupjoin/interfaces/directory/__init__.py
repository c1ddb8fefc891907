"""groupjoin Directory Interface Package"""

from .directory import Directory
from .errors import (
    DirectoryError,
    RoleAlreadyExists,
    RoleNotFoundError,
    UserAlreadyExists,
    UserNotFoundError,
    UserRoleAlreadyExists,
)

__all__ = [
    "Directory",
    "DirectoryError",
    "RoleAlreadyExists",
    "RoleNotFoundError",
    "UserAlreadyExists",
    "UserNotFoundError",
    "UserRoleAlreadyExists",
]
