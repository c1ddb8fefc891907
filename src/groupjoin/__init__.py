"""groupjoin

Users, roles and the link table between them, plus the left-outer group-join
that answers "which roles exist, and which of them does this user hold?"
identically across in-memory, SQLite and PostgreSQL storage.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
