"""
User models for the application database.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, Field


class RoleGrant(BaseModel):
    """A role granted on a single database."""
    role: str = Field(..., description="Built-in or custom role name")
    db: str = Field(..., description="Database the role applies to")


class AppCredential(BaseModel):
    """
    Application database user, created with the createUser command.
    """
    user: str = Field(..., description="User name")
    pwd: str = Field(..., description="Clear-text password, hashed by the server")
    roles: list[RoleGrant] = Field(
        default_factory=list,
        description="Per-database role grants"
    )


class UserRecord(BaseModel):
    """
    User document model for the myapp.users collection.
    """
    name: str
    email: str
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Set when the document is built for insertion"
    )
