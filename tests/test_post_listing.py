"""Listing across several pages through the HTTP API."""


async def test_default_page_size_and_next_link(client, auth_headers, make_post):
    for _ in range(20):
        await make_post()

    res = await client.get("/api/posts", headers=auth_headers)

    body = res.json()
    assert len(body["data"]) == 15
    assert body["links"]["prev"] is None
    assert body["links"]["next"] == "http://test/api/posts?page=2"
    assert body["meta"]["last_page"] == 2


async def test_second_page(client, auth_headers, make_post):
    for _ in range(20):
        await make_post()

    res = await client.get("/api/posts", params={"page": 2}, headers=auth_headers)

    body = res.json()
    assert len(body["data"]) == 5
    assert body["links"]["prev"] == "http://test/api/posts?page=1"
    assert body["links"]["next"] is None
    assert body["meta"]["from"] == 16


async def test_per_page_is_capped(client, auth_headers, make_post):
    await make_post()

    res = await client.get("/api/posts", params={"per_page": 1000}, headers=auth_headers)

    assert res.json()["meta"]["per_page"] == 100


async def test_page_below_one_is_first_page(client, auth_headers, make_post):
    await make_post("Only")

    res = await client.get("/api/posts", params={"page": 0}, headers=auth_headers)

    body = res.json()
    assert body["meta"]["current_page"] == 1
    assert body["data"][0]["title"] == "Only"
