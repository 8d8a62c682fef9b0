from starlette.datastructures import URL

from src.core.response.pagination import build_links, build_meta, paginate_response
from src.core.response.schemas import Page

BASE = URL("http://test/api/posts")


def test_links_on_middle_page():
    page = Page(items=[1] * 15, total=40, page=2, per_page=15)

    links = build_links(BASE, page)

    assert links.first == "http://test/api/posts?page=1"
    assert links.last == "http://test/api/posts?page=3"
    assert links.prev == "http://test/api/posts?page=1"
    assert links.next == "http://test/api/posts?page=3"


def test_links_on_single_page_have_no_neighbours():
    page = Page(items=[1, 2], total=2, page=1, per_page=15)

    links = build_links(BASE, page)

    assert links.first == links.last == "http://test/api/posts?page=1"
    assert links.prev is None
    assert links.next is None


def test_links_keep_other_query_parameters():
    url = URL("http://test/api/posts?per_page=5&page=1")
    page = Page(items=[1] * 5, total=6, page=1, per_page=5)

    links = build_links(url, page)

    assert links.next == "http://test/api/posts?per_page=5&page=2"


def test_empty_page_meta():
    meta = build_meta(BASE, Page(items=[], total=0, page=1, per_page=15))

    assert meta.last_page == 1
    assert meta.from_ is None
    assert meta.to is None
    assert meta.path == "http://test/api/posts"


def test_meta_uses_from_alias_when_serialized():
    response = paginate_response(
        URL("http://test/api/posts?page=2"),
        Page(items=["a", "b"], total=17, page=2, per_page=15),
        transform=str.upper,
    )

    body = response.model_dump(by_alias=True)
    assert body["data"] == ["A", "B"]
    assert body["meta"]["from"] == 16
    assert body["meta"]["to"] == 17
    assert body["meta"]["last_page"] == 2
