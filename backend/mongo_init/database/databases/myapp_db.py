"""
Application database configuration.
Holds the application user, its collections and the sample records.
"""

DB_NAME = "myapp"


class Collections:
    """Collection names in myapp."""
    USERS = "users"


# Application credential, scoped to DB_NAME
APP_USER = {
    "user": "appuser",
    "pwd": "apppassword",
    "roles": [
        {"role": "readWrite", "db": DB_NAME},
        {"role": "dbAdmin", "db": DB_NAME},
    ],
}

# Sample records for the users collection; created_at is stamped on insert
SAMPLE_USERS = [
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Smith", "email": "jane@example.com"},
]

COMPLETION_MESSAGE = "MongoDB initialization completed"
