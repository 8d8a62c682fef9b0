"""Post service."""

from typing import Any, Dict
from src.core.bases.base_service import BaseService
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.models.post import Post


class PostService(BaseService[Post]):
    """Post service class."""

    def __init__(self, repository: PostRepository):
        super().__init__(repository)

    @staticmethod
    def _clean(data: Dict[str, Any]) -> None:
        if isinstance(data.get("title"), str):
            data["title"] = data["title"].strip()

    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        """A post needs a non-blank title."""
        self._clean(create_data)
        self.required(create_data, "title")

    async def _validate_update(
        self,
        item_id: Any,
        update_data: Dict[str, Any],
        existing_item: Post
    ) -> None:
        """Updates follow the same title rule as creation."""
        self._clean(update_data)
        self.required(update_data, "title")
