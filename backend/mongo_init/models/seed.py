"""
Summary of one initializer run.
"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel


class SeedResult(BaseModel):
    """What a completed run created."""
    db_name: str
    user: str
    collection: str
    inserted_ids: list[Any]
    started_at: datetime
    finished_at: datetime

    @property
    def inserted_count(self) -> int:
        return len(self.inserted_ids)
