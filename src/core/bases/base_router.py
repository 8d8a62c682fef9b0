import json
from typing import Any, Callable, Dict, List, Optional, Type
from fastapi import APIRouter, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.params import Depends
from pydantic import BaseModel, ValidationError

from src.core.bases.base_service import BaseService
from src.core.config import settings
from src.core.response.handlers import no_content_response, success_response
from src.core.response.pagination import paginate_response


class BaseRouter:
    """Base router class with automatic CRUD endpoints.

    Registers ``GET ""``, ``POST ""``, ``GET /{item_id}``, ``PUT /{item_id}``
    and ``DELETE /{item_id}`` under ``prefix``. Errors raised by the service
    propagate to the application exception handlers.
    """

    def __init__(
        self,
        service: BaseService,
        tags: Optional[List[str]] = None,
        prefix: str = "",
        create_schema: Optional[Type[BaseModel]] = None,
        update_schema: Optional[Type[BaseModel]] = None,
        resource: Optional[Callable[[Any], Any]] = None,
        dependencies: Optional[List[Depends]] = None,
    ):
        self.service = service
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.resource = resource or (lambda item: item)

        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags,  # type:ignore
            dependencies=dependencies or [],
        )

        self._register_routes()

    def _register_routes(self) -> None:
        """Register all CRUD routes."""
        self._register_list()
        self._register_create()
        self._register_get_by_id()
        self._register_update()
        self._register_delete()

    @staticmethod
    def _request_body_doc(schema: Type[BaseModel]) -> Dict[str, Any]:
        return {
            "requestBody": {
                "content": {"application/json": {"schema": schema.model_json_schema()}}
            }
        }

    @staticmethod
    async def _parse_body(request: Request, schema: Type[BaseModel]) -> Optional[BaseModel]:
        """Decode and validate the JSON body.

        Called from the endpoint, so it runs after the router dependencies
        (the guard) have accepted the request.
        """
        raw = await request.body()
        if not raw.strip():
            return None
        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
            ) from e
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            raise RequestValidationError(
                [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
            ) from e

    def _register_list(self) -> None:
        """Register GET route with pagination."""

        @self.router.get(
            "",
            summary="List items",
            responses={
                200: {"description": "Items retrieved successfully"},
                401: {"description": "Unauthenticated"},
            },
        )
        async def list_items(
            request: Request,
            page: int = Query(1, description="Page number"),
            per_page: int = Query(settings.DEFAULT_PER_PAGE, description="Items per page"),
        ):
            result = await self.service.get_list(page=page, per_page=per_page)
            return success_response(paginate_response(request.url, result, self.resource))

    def _register_create(self) -> None:
        """Register POST route."""
        if not self.create_schema:
            return

        @self.router.post(
            "",
            status_code=status.HTTP_201_CREATED,
            summary="Create new item",
            openapi_extra=self._request_body_doc(self.create_schema),
            responses={
                201: {"description": "Item created successfully"},
                401: {"description": "Unauthenticated"},
                422: {"description": "Validation error"},
            },
        )
        async def create_item(request: Request):
            item_data = await self._parse_body(request, self.create_schema)  # type: ignore
            result = await self.service.create(item_data)
            return success_response(
                self.resource(result), status_code=status.HTTP_201_CREATED
            )

    def _register_get_by_id(self) -> None:
        """Register GET /{item_id} route."""

        @self.router.get(
            "/{item_id}",
            summary="Get item by ID",
            responses={
                200: {"description": "Item retrieved successfully"},
                401: {"description": "Unauthenticated"},
                404: {"description": "Item not found"},
            },
        )
        async def get_by_id(item_id: int):
            result = await self.service.get_by_id(item_id)
            return success_response(self.resource(result))

    def _register_update(self) -> None:
        """Register PUT /{item_id} route."""
        if not self.update_schema:
            return

        @self.router.put(
            "/{item_id}",
            summary="Update item",
            openapi_extra=self._request_body_doc(self.update_schema),
            responses={
                200: {"description": "Item updated successfully"},
                401: {"description": "Unauthenticated"},
                404: {"description": "Item not found"},
                422: {"description": "Validation error"},
            },
        )
        async def update_item(item_id: int, request: Request):
            item_data = await self._parse_body(request, self.update_schema)  # type: ignore
            result = await self.service.update(item_id, item_data)
            return success_response(self.resource(result))

    def _register_delete(self) -> None:
        """Register DELETE /{item_id} route."""

        @self.router.delete(
            "/{item_id}",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
            summary="Delete item",
            responses={
                204: {"description": "Item deleted"},
                401: {"description": "Unauthenticated"},
                404: {"description": "Item not found"},
            },
        )
        async def delete_item(item_id: int):
            await self.service.delete(item_id)
            return no_content_response()

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
