from typing import Any, Callable, Dict, Generic, Optional, Type, TypeVar, Union
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from pydantic import BaseModel

from src.core.response import schemas

T = TypeVar("T", bound=SQLModel)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class BaseRepository(Generic[T]):
    model: Type[T]

    def __init__(self, get_session: Callable[..., AsyncSession]):
        self.get_session = get_session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise RepositoryError(
                f"Database integrity error during {operation}: {error}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def _build_select_stmt(self, **filters) -> Any:
        """Build select statement ordered by primary key with optional equality filters."""
        stmt = select(self.model).order_by(self.model.id)  # type: ignore

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        return stmt

    # ----------------- READ ----------------- #
    async def get(self, item_id: Any, **filters) -> Optional[T]:
        """Get a single item by ID with optional additional filters."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters)
                stmt = stmt.where(self.model.id == item_id)  # type: ignore

                result = await db.exec(stmt)
                return result.first()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get")

    async def get_one(self, **filters) -> Optional[T]:
        """Get a single item matching the filters."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters)
                result = await db.exec(stmt)
                return result.first()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_one")

    async def paginate(
        self,
        page: int = 1,
        per_page: int = 15,
        max_per_page: int = 100,
        default_per_page: int = 15,
        **filters,
    ) -> schemas.Page:  # type:ignore
        """Get one page of items in primary key order."""
        if page < 1:
            page = 1
        if per_page < 1:
            per_page = default_per_page
        per_page = min(per_page, max_per_page)

        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters)

                count_stmt = select(func.count()).select_from(stmt.subquery())
                total_result = await db.exec(count_stmt)
                total = total_result.one()

                offset = (page - 1) * per_page
                result = await db.exec(stmt.offset(offset).limit(per_page))
                items = result.all()

                return schemas.Page(
                    items=list(items),
                    total=total,
                    page=page,
                    per_page=per_page,
                )
            except SQLAlchemyError as e:
                self._handle_db_error(e, "paginate")

    async def exists(self, item_id: Any) -> bool:  # type:ignore
        """Check if an item exists."""
        async with self.get_session() as db:
            try:
                stmt = select(self.model.id).where(self.model.id == item_id)  # type: ignore
                result = await db.exec(stmt)
                return result.first() is not None
            except SQLAlchemyError as e:
                self._handle_db_error(e, "exists")

    async def count(self, **filters) -> int:  # type:ignore
        """Count items matching optional filters."""
        async with self.get_session() as db:
            try:
                stmt = self._build_select_stmt(**filters)
                count_stmt = select(func.count()).select_from(stmt.subquery())
                result = await db.exec(count_stmt)
                return result.one()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "count")

    # ----------------- WRITE ----------------- #
    async def create(
        self, obj_in: Union[Dict[str, Any], BaseModel]
    ) -> T:  # type:ignore
        """Create a new item."""
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump(exclude_unset=True)

        async with self.get_session() as db:
            try:
                obj = self.model(**obj_in)  # type: ignore
                db.add(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create")

    async def update(
        self,
        item_id: Any,
        obj_in: Union[Dict[str, Any], BaseModel],
        exclude_unset: bool = True,
    ) -> Optional[T]:
        """Update an existing item, returning None when it does not exist."""
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump(exclude_unset=exclude_unset)
        else:
            update_data = dict(obj_in)

        # Primary key and timestamps are owned by storage
        for key in ("id", "created_at", "updated_at"):
            update_data.pop(key, None)

        if not update_data:
            raise RepositoryError("No data provided for update")

        async with self.get_session() as db:
            try:
                db_obj = await db.get(self.model, item_id)
                if not db_obj:
                    return None

                for key, value in update_data.items():
                    if hasattr(db_obj, key):
                        setattr(db_obj, key, value)

                db.add(db_obj)
                await db.commit()
                await db.refresh(db_obj)
                return db_obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "update")

    async def delete(self, item_id: Any) -> bool:  # type:ignore
        """Permanently delete the item from DB."""
        async with self.get_session() as db:
            try:
                db_obj = await db.get(self.model, item_id)
                if not db_obj:
                    return False

                await db.delete(db_obj)
                await db.commit()
                return True
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "delete")
