"""
Pydantic models for database documents and data structures.
"""
from mongo_init.models.user import AppCredential, RoleGrant, UserRecord
from mongo_init.models.seed import SeedResult

__all__ = [
    "AppCredential",
    "RoleGrant",
    "UserRecord",
    "SeedResult",
]
