"""
User credential model for the users collection.
"""
from pydantic import BaseModel, Field


class UserCredential(BaseModel):
    """
    Login credential record.

    Passwords are stored and compared as plaintext.
    """
    username: str = Field(..., description="Login name")
    password: str = Field(..., description="Plaintext password")
