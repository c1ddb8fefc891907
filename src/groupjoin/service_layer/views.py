"""Read-side queries.

Views read through a unit of work and never commit.
"""

import logging

from groupjoin.domain.group_join import roles_with_user_links
from groupjoin.domain.models import Role
from groupjoin.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


def roles_by_user(uow: AbstractUnitOfWork, user_id: int) -> list[Role]:
    """Return every role, each carrying the link rows of ``user_id``.

    Roles and the user's link rows are read in one unit of work (a single
    snapshot) and joined in memory, so all backends give the same answer.
    The user need not exist; unknown users simply hold no roles.

    Args:
        uow: Unit of work to read through.
        user_id: The user whose assignments are attached.

    Returns:
        list[Role]: All roles ordered by id, with ``user_roles`` populated.
    """
    with uow:
        all_roles = uow.directory.list_roles()
        links = uow.directory.list_user_roles(user_id=user_id)

    result = roles_with_user_links(all_roles, links, user_id)
    logger.debug(
        "roles_by_user(%s): %d roles, %d links", user_id, len(result), len(links)
    )
    return result


def user_role_exists(uow: AbstractUnitOfWork, user_id: int, role_id: int) -> bool:
    """Return True if the user currently holds the role."""
    with uow:
        return uow.directory.get_user_role(user_id, role_id) is not None
