"""Service layer for groupjoin.

Commands and their handlers (writes), the message bus that routes them, and
views (reads) such as the roles-by-user group-join.
"""
