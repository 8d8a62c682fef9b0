"""User service."""

import logging
from typing import Any, Dict, List, Optional, Tuple

from src.core import exceptions
from src.core.bases.base_repository import RepositoryError
from src.core.bases.base_service import BaseService
from src.core.response.schemas import ErrorDetail
from src.core.security import generate_token, hash_token
from src.apps.auth.repositories.user_repository import UserRepository
from src.apps.auth.models.user import User

logger = logging.getLogger(__name__)


class UserService(BaseService[User]):
    """Creates users, issues their API tokens and authenticates requests."""

    def __init__(self, repository: UserRepository):
        super().__init__(repository)
        self.repository: UserRepository = repository

    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        self.required(create_data, "name", "email")
        if await self.repository.get_by_email(create_data["email"]):
            raise exceptions.ConflictException(
                "The email has already been taken.",
                error_details=[
                    ErrorDetail(
                        field="email",
                        code="UNIQUE",
                        message="The email has already been taken.",
                    )
                ],
            )

    async def create_user(self, name: str, email: str) -> Tuple[User, str]:
        """Create a user and return it with its plain-text token."""
        token = generate_token()
        await self._validate_create({"name": name, "email": email})
        try:
            user = await self.repository.create(
                {"name": name, "email": email, "api_token": hash_token(token)}
            )
        except RepositoryError as e:
            raise self._storage_error(e) from e
        logger.info("Created user %s", user.id)
        return user, token

    async def issue_token(self, email: str) -> str:
        """Replace the token of the user with ``email`` and return the new one."""
        user = await self.repository.get_by_email(email)
        if user is None:
            raise exceptions.NotFoundException(f"User {email} not found.")
        token = generate_token()
        await self.update(user.id, {"api_token": hash_token(token)})
        return token

    async def list_users(self, batch_size: int = 100) -> List[User]:
        """Every user, fetched page by page."""
        users: List[User] = []
        page_number = 1
        while True:
            try:
                page = await self.repository.paginate(
                    page=page_number, per_page=batch_size, max_per_page=batch_size
                )
            except RepositoryError as e:
                raise self._storage_error(e) from e
            users.extend(page.items)
            if page_number >= page.last_page:
                return users
            page_number += 1

    async def authenticate(self, credential: Optional[str]) -> User:
        """Resolve a raw credential to its user or raise UnauthorizedException."""
        if not credential:
            raise exceptions.UnauthorizedException()
        try:
            user = await self.repository.get_by_token_hash(hash_token(credential))
        except RepositoryError as e:
            raise self._storage_error(e) from e
        if user is None:
            logger.info("Rejected request with unknown API token")
            raise exceptions.UnauthorizedException()
        return user
