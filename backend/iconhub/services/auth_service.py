"""
Authentication service for login.
"""
import logging

from fastapi import status
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from iconhub.core.errors import AuthError
from iconhub.core.security import TokenService
from iconhub.database.databases import icons_db
from iconhub.models.user import UserCredential

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase, token_service: TokenService):
        """Initialize with the icon library database and a token service."""
        self.db = db
        self.users_collection = db[icons_db.Collections.USERS]
        self.token_service = token_service

    async def find_credential(self, username: str, password: str) -> dict | None:
        """
        Find a credential record matching both fields exactly.

        Accepts flat ``{username, password}`` records as well as documents
        holding a ``users`` array of such pairs, where one element must match both.
        """
        return await self.users_collection.find_one({
            "$or": [
                {"username": username, "password": password},
                {"users": {"$elemMatch": {"username": username, "password": password}}},
            ]
        })

    async def login(self, username: str, password: str) -> str:
        """
        Authenticate a user and return a JWT token.

        Args:
            username: Login name
            password: Plaintext password

        Returns:
            Signed token valid for the configured lifetime

        Raises:
            AuthError: 401 if credentials are invalid, 500 on storage failure
        """
        try:
            record = await self.find_credential(username, password)
        except PyMongoError as e:
            logger.error(f"Error during login: {e}")
            raise AuthError(
                "Server error",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ) from e

        if record is None:
            raise AuthError("Invalid username or password")

        return self.token_service.issue(username)

    async def create_user(self, username: str, password: str) -> str:
        """
        Insert a credential record.

        Returns:
            Inserted document ID as string

        Raises:
            ValueError: If the username already exists
        """
        existing = await self.users_collection.find_one({
            "$or": [{"username": username}, {"users.username": username}]
        })
        if existing:
            raise ValueError("Username already exists")

        credential = UserCredential(username=username, password=password)
        result = await self.users_collection.insert_one(credential.model_dump())
        return str(result.inserted_id)
