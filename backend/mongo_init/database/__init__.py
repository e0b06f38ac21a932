"""
Database module - MongoDB connection scope and database definitions.
"""
from mongo_init.database.connections import open_mongo_client, get_database
from mongo_init.database.databases import myapp_db

__all__ = [
    "open_mongo_client",
    "get_database",
    "myapp_db",
]
