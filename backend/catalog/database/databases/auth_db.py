"""
Auth database configuration.
Stores user identity; read here only to authorize mutating calls.
"""


class Collections:
    """Collection names in auth_db."""
    USERS = "users"
