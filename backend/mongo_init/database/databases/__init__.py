"""
Database definitions and collection constants.
"""
from mongo_init.database.databases import myapp_db

__all__ = ["myapp_db"]
