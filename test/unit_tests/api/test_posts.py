from http import HTTPStatus

import pytest
from sqlalchemy import select

from postboard.db import PostBodyTable, PostTable, db


def search(test_client, **params):
    response = test_client.get("/api/posts/", params=params)
    assert response.status_code == HTTPStatus.OK, response.text
    return response.json()


def ids(result) -> list[int]:
    return [post["id"] for post in result["content"]]


def test_search_posts_only_listed(test_client, generic_posts):
    result = search(test_client)

    assert ids(result) == [5, 4, 2, 1]
    assert result["pageable"] == {
        "pageNumber": 1,
        "pageSize": 5,
        "totalElements": 4,
        "totalPages": 1,
        "sorted": False,
    }


def test_search_posts_dto(test_client, generic_posts):
    result = search(test_client, pageSize=1)

    post = result["content"][0]
    assert post["authorNickname"] == "Carol"
    assert post["authorId"] == 4
    assert post["title"] == "Sorting"
    assert "content" not in post


@pytest.mark.parametrize(
    "sort,expected",
    [
        (["title,asc"], [4, 1, 2, 5]),
        (["title,desc"], [5, 2, 1, 4]),
        (["authorId,asc", "id,desc"], [1, 5, 2, 4]),
        (["authorId,desc", "id,asc"], [4, 2, 5, 1]),
        (["listed,asc", "title,asc"], [4, 1, 2, 5]),
    ],
)
def test_search_posts_sort(test_client, generic_posts, sort, expected):
    result = search(test_client, sort=sort)

    assert ids(result) == expected
    assert result["pageable"]["sorted"] is True


def test_search_posts_paging(test_client, generic_posts):
    result = search(test_client, page=2, pageSize=3, sort="id,asc")

    assert ids(result) == [5]
    assert result["pageable"]["totalPages"] == 2


@pytest.mark.parametrize("params", [{"page": "first", "pageSize": "all"}, {"page": "-", "pageSize": "1e3"}])
def test_search_posts_non_numeric_page_parameters(test_client, generic_posts, params):
    result = search(test_client, **params)

    assert ids(result) == [5, 4, 2, 1]
    assert (result["pageable"]["pageNumber"], result["pageable"]["pageSize"]) == (1, 5)


def test_search_posts_huge_page(test_client, generic_posts):
    result = search(test_client, page=10**20, pageSize=30)

    assert result["content"] == []
    assert result["pageable"]["totalElements"] == 4


@pytest.mark.parametrize(
    "kw_type,kw,expected",
    [
        ("title", "HELLO", [4, 1]),
        ("content", "structlog", [2]),
        ("authorNickname", "bob", [4, 1]),
        ("all", "order", [5]),
        ("all", "secret", []),
    ],
)
def test_search_posts_keyword(test_client, generic_posts, kw_type, kw, expected):
    result = search(test_client, kwType=kw_type, kw=kw)

    assert ids(result) == expected
    assert result["pageable"]["totalElements"] == len(expected)


def test_post_by_id(test_client, generic_posts):
    response = test_client.get("/api/posts/3")

    assert response.status_code == HTTPStatus.OK
    post = response.json()
    assert (post["title"], post["content"], post["listed"]) == ("Draft", "secret", False)


def test_post_by_id_not_found(test_client):
    response = test_client.get("/api/posts/123")

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json()["detail"] == "Post id 123 not found"


def test_write(test_client, generic_members):
    body = {"authorId": 2, "title": "Welcome", "content": "Read the rules", "published": True, "listed": True}

    response = test_client.post("/api/posts/", json=body)

    assert response.status_code == HTTPStatus.CREATED
    post = response.json()
    assert (post["authorNickname"], post["title"], post["content"]) == ("Admin", "Welcome", "Read the rules")
    assert ids(search(test_client)) == [post["id"]]


def test_write_unknown_author(test_client):
    response = test_client.post("/api/posts/", json={"authorId": 42, "title": "Lost", "content": "nobody"})

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json()["detail"] == "Member id 42 not found"


def test_modify(test_client, generic_posts):
    body = {"title": "Final", "content": "no longer a draft", "published": True, "listed": True}

    response = test_client.put("/api/posts/3", json=body)

    assert response.status_code == HTTPStatus.OK
    post = response.json()
    assert (post["title"], post["content"], post["listed"]) == ("Final", "no longer a draft", True)
    assert 3 in ids(search(test_client, pageSize=10))


def test_modify_not_found(test_client):
    response = test_client.put("/api/posts/3", json={"title": "Final", "content": "x"})

    assert response.status_code == HTTPStatus.NOT_FOUND


def test_delete(test_client, generic_posts):
    response = test_client.delete("/api/posts/1")

    assert response.status_code == HTTPStatus.NO_CONTENT
    assert test_client.get("/api/posts/1").status_code == HTTPStatus.NOT_FOUND

    db.session.expire_all()
    assert db.session.get(PostTable, 1) is None
    assert len(db.session.scalars(select(PostBodyTable)).all()) == 4
