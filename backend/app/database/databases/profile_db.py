"""
Profile database configuration.
Stores user identities together with their profile attributes.
"""

DB_NAME = "profile_db"


class Collections:
    """Collection names in profile_db."""
    USERS = "users"


# Indexes backing the uniqueness invariants
INDEXES = {
    Collections.USERS: [
        {"keys": [("username", 1)], "unique": True},
        {"keys": [("email", 1)], "unique": True},
    ],
}
