from math import ceil
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Page(BaseModel):
    """One page of repository results."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: List[Any] = []
    total: int = Field(default=0)
    page: int = Field(default=1)
    per_page: int = Field(default=15)

    @property
    def last_page(self) -> int:
        return max(1, ceil(self.total / self.per_page))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


class PaginationLinks(BaseModel):
    first: str
    last: str
    prev: Optional[str] = None
    next: Optional[str] = None


class PaginationMeta(BaseModel):
    current_page: int
    # "from" is a keyword, exposed under its alias
    from_: Optional[int] = Field(default=None, alias="from")
    last_page: int
    path: str
    per_page: int
    to: Optional[int] = None
    total: int

    model_config = ConfigDict(populate_by_name=True)


class PaginatedResponse(BaseModel):
    data: List[Any] = []
    links: PaginationLinks
    meta: PaginationMeta


class ErrorDetail(BaseModel):
    field: str = ""
    code: str = Field(default="ERROR")
    message: str = Field(default="Unknown Error")


class ErrorResponse(BaseModel):
    message: str
    errors: Optional[Dict[str, List[str]]] = None
