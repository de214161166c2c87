"""
MongoDB connection management.

The client is created once by the application lifespan (or the admin CLI)
and handed to the services that need it; nothing here holds global state.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from iconhub.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client from settings."""
    return AsyncIOMotorClient(settings.mongo_uri)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the configured icon library database."""
    return client[settings.mongo_db_name]


async def ping(client: AsyncIOMotorClient) -> None:
    """Round-trip to the server; raises on connection failure."""
    await client.admin.command("ping")
