"""
Service layer for the initializer.
"""
from mongo_init.services.seed_service import MongoSeeder

__all__ = ["MongoSeeder"]
