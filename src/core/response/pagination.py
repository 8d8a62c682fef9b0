from typing import Any, Callable, Optional

from starlette.datastructures import URL

from src.core.response.schemas import Page, PaginatedResponse, PaginationLinks, PaginationMeta


def page_url(url: URL, page_number: int) -> str:
    """URL of ``page_number``, keeping the other query parameters of ``url``."""
    return str(url.include_query_params(page=page_number))


def build_links(url: URL, page: Page) -> PaginationLinks:
    return PaginationLinks(
        first=page_url(url, 1),
        last=page_url(url, page.last_page),
        prev=page_url(url, page.page - 1) if page.page > 1 else None,
        next=page_url(url, page.page + 1) if page.page < page.last_page else None,
    )


def build_meta(url: URL, page: Page) -> PaginationMeta:
    count = len(page.items)
    return PaginationMeta(
        current_page=page.page,
        from_=page.offset + 1 if count else None,
        last_page=page.last_page,
        path=str(url.replace(query="")),
        per_page=page.per_page,
        to=page.offset + count if count else None,
        total=page.total,
    )


def paginate_response(
    url: URL, page: Page, transform: Optional[Callable[[Any], Any]] = None
) -> PaginatedResponse:
    """Wrap a page of items in the ``data``/``links``/``meta`` envelope."""
    items = [transform(item) for item in page.items] if transform else list(page.items)
    return PaginatedResponse(
        data=items,
        links=build_links(url, page),
        meta=build_meta(url, page),
    )
