"""
Database module - MongoDB connection and collection definitions.
"""
from iconhub.database.connections import create_mongo_client, get_database, ping
from iconhub.database.databases import icons_db

__all__ = [
    "create_mongo_client",
    "get_database",
    "ping",
    "icons_db",
]
