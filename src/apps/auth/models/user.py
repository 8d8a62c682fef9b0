"""User model."""

from typing import Optional

from sqlmodel import Field
from src.core.database import BaseModel


class User(BaseModel, table=True):
    """API user; only its identity and token are used by the guard."""

    __tablename__ = "users"  # type: ignore
    name: str = Field()
    email: str = Field(index=True, unique=True)
    api_token: Optional[str] = Field(default=None, index=True, unique=True)
