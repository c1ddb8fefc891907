"""Left-outer group-join of roles against user/role link rows.

For a given user, every role is returned exactly once, in input order, carrying
the link rows that assign that role to that user. Roles the user does not hold
carry an empty tuple, so callers never need to tell "no links" from "not
loaded".

The join runs in two passes: link rows are indexed by ``role_id`` (keeping only
the requested user's rows), then each role probes the index. Cost is
O(|roles| + |links|) regardless of how many users share a role.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import replace

from .models import Role, UserRole


def index_links_by_role(
    links: Iterable[UserRole], user_id: int
) -> dict[int, tuple[UserRole, ...]]:
    """Group the link rows of ``user_id`` by role id.

    Rows belonging to other users are skipped while the index is built. Rows
    keep their input order within each group, and duplicates are kept.

    Args:
        links: Any link rows; either the whole link table or only the user's.
        user_id: The user whose assignments are indexed.

    Returns:
        Mapping of role id to the matching link rows. Roles without matches
        are absent from the mapping.
    """
    index: defaultdict[int, list[UserRole]] = defaultdict(list)
    for link in links:
        if link.user_id == user_id:
            index[link.role_id].append(link)
    return {role_id: tuple(rows) for role_id, rows in index.items()}


def roles_with_user_links(
    roles: Iterable[Role], links: Iterable[UserRole], user_id: int
) -> list[Role]:
    """Return every role annotated with the link rows of ``user_id``.

    Args:
        roles: All roles; output order follows this order.
        links: Link rows to join against. Passing the full link table or only
            the rows of ``user_id`` yields the same result.
        user_id: The user whose assignments are requested. It need not exist.

    Returns:
        One copy of each input role with ``user_roles`` set to the matching
        link rows (``()`` when there are none). The inputs are not modified.
    """
    index = index_links_by_role(links, user_id)
    return [replace(role, user_roles=index.get(role.id, ())) for role in roles]
