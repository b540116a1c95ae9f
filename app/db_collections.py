"""
Centralized MongoDB collection names.
Single source of truth: routers and repositories import names from here.
"""

# Employee directory
COLL_EMPLOYEES = "employees"


class Collections:
    """Collection names as attributes, for `db[Collections.X]` access."""

    EMPLOYEES = COLL_EMPLOYEES
