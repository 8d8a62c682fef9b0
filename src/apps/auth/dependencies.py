"""Auth dependencies."""

from typing import Optional

from fastapi import Depends

from src.core.database import get_session
from src.core.security import get_credential
from src.apps.auth.models.user import User
from src.apps.auth.repositories.user_repository import UserRepository
from src.apps.auth.services.user_service import UserService


def get_user_repository():
    """Get user repository instance."""
    return UserRepository(get_session)  # type:ignore


def get_user_service():
    """Get user service instance."""
    return UserService(get_user_repository())


async def get_current_user(
    credential: Optional[str] = Depends(get_credential),
    user_service: UserService = Depends(get_user_service),
) -> User:
    """Guard for API routes: the authenticated user or a 401 response."""
    return await user_service.authenticate(credential)
