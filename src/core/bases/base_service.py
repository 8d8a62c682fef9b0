import logging
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from pydantic import BaseModel
from sqlmodel import SQLModel

from src.core import exceptions
from src.core.bases.base_repository import BaseRepository, RepositoryError
from src.core.config import settings
from src.core.response.schemas import ErrorDetail, Page

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """CRUD service over a repository with validation hooks."""

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @property
    def model_name(self) -> str:
        return self.repository.model.__name__

    # ----------------- Hooks ----------------- #
    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        """Validate data before creation."""
        pass

    async def _validate_update(
        self, item_id: Any, update_data: Dict[str, Any], existing_item: T
    ) -> None:
        """Validate data before update."""
        pass

    async def _validate_delete(self, item_id: Any, existing_item: T) -> None:
        """Validate before delete."""
        pass

    # ----------------- Helpers ----------------- #
    @staticmethod
    def _to_dict(data: Union[Dict[str, Any], BaseModel, None]) -> Dict[str, Any]:
        if data is None:
            return {}
        if isinstance(data, BaseModel):
            return data.model_dump(exclude_unset=True)
        return dict(data)

    @staticmethod
    def required(data: Dict[str, Any], *fields: str) -> None:
        """Raise ValidationException for every missing or blank field."""
        details = []
        for field in fields:
            value = data.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                details.append(
                    ErrorDetail(
                        field=field,
                        code="REQUIRED",
                        message=f"The {field} field is required.",
                    )
                )
        if details:
            raise exceptions.ValidationException(error_details=details)

    def _storage_error(self, error: RepositoryError) -> exceptions.ServiceException:
        logger.error("%s storage error: %s", self.model_name, error)
        return exceptions.ServiceException()

    def _not_found(self, item_id: Any) -> exceptions.NotFoundException:
        return exceptions.NotFoundException(f"{self.model_name} {item_id} not found.")

    # ----------------- CRUD ----------------- #
    async def get_by_id(self, item_id: Any) -> T:
        try:
            item = await self.repository.get(item_id)
        except RepositoryError as e:
            raise self._storage_error(e) from e
        if item is None:
            raise self._not_found(item_id)
        return item

    async def get_list(self, page: int = 1, per_page: Optional[int] = None) -> Page:
        try:
            return await self.repository.paginate(
                page=page,
                per_page=per_page or settings.DEFAULT_PER_PAGE,
                max_per_page=settings.MAX_PER_PAGE,
                default_per_page=settings.DEFAULT_PER_PAGE,
            )
        except RepositoryError as e:
            raise self._storage_error(e) from e

    async def create(self, data: Union[Dict[str, Any], BaseModel, None]) -> T:
        create_data = self._to_dict(data)
        await self._validate_create(create_data)
        try:
            item = await self.repository.create(create_data)
        except RepositoryError as e:
            raise self._storage_error(e) from e
        logger.info("Created %s %s", self.model_name, item.id)  # type: ignore
        return item

    async def update(self, item_id: Any, data: Union[Dict[str, Any], BaseModel, None]) -> T:
        existing_item = await self.get_by_id(item_id)
        update_data = self._to_dict(data)
        await self._validate_update(item_id, update_data, existing_item)
        try:
            item = await self.repository.update(item_id, update_data)
        except RepositoryError as e:
            raise self._storage_error(e) from e
        if item is None:
            raise self._not_found(item_id)
        logger.info("Updated %s %s", self.model_name, item_id)
        return item

    async def delete(self, item_id: Any) -> None:
        existing_item = await self.get_by_id(item_id)
        await self._validate_delete(item_id, existing_item)
        try:
            deleted = await self.repository.delete(item_id)
        except RepositoryError as e:
            raise self._storage_error(e) from e
        if not deleted:
            raise self._not_found(item_id)
        logger.info("Deleted %s %s", self.model_name, item_id)
