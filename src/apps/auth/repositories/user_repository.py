"""User repository."""

from typing import Optional

from src.core.bases.base_repository import BaseRepository
from src.apps.auth.models.user import User


class UserRepository(BaseRepository[User]):
    """User repository class."""

    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self.get_one(email=email)

    async def get_by_token_hash(self, token_hash: str) -> Optional[User]:
        return await self.get_one(api_token=token_hash)
