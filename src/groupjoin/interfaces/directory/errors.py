"""Exceptions for directory operations."""


class DirectoryError(Exception):
    """Base class for directory errors."""


class UserAlreadyExists(DirectoryError):
    """Conflict: a user with this id is already stored.

    Attributes:
        user_id (int): The conflicting user id.
    """

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} already exists.")
        self.user_id = user_id


class RoleAlreadyExists(DirectoryError):
    """Conflict: a role with this id is already stored.

    Attributes:
        role_id (int): The conflicting role id.
    """

    def __init__(self, role_id: int):
        super().__init__(f"Role {role_id} already exists.")
        self.role_id = role_id


class UserRoleAlreadyExists(DirectoryError):
    """Conflict: the user already holds the role.

    Attributes:
        user_id (int): The user id of the existing link row.
        role_id (int): The role id of the existing link row.
    """

    def __init__(self, user_id: int, role_id: int):
        super().__init__(f"User {user_id} is already assigned role {role_id}.")
        self.user_id = user_id
        self.role_id = role_id


class UserNotFoundError(DirectoryError):
    """Raised when a referenced user does not exist."""

    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found.")
        self.user_id = user_id


class RoleNotFoundError(DirectoryError):
    """Raised when a referenced role does not exist."""

    def __init__(self, role_id: int):
        super().__init__(f"Role {role_id} not found.")
        self.role_id = role_id
