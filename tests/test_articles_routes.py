from __future__ import annotations

import asyncio

import asyncpg
import pytest
from fastapi import HTTPException

from articles import repository as article_repository
from articles import service as article_service
from factories import article_row
from topics import repository as topic_repository


def _summary(article_id: int, **overrides):
    row = article_row(article_id, **overrides)
    row.pop("body")
    return row


def test_list_articles_defaults_to_newest_first(client, fake_async):
    calls = fake_async(article_repository, "list_articles", [_summary(3), _summary(1)])

    resp = client.get("/api/articles")

    assert resp.status_code == 200
    body = resp.json()
    assert [a["article_id"] for a in body] == [3, 1]
    assert "body" not in body[0]
    assert body[0]["comment_count"] == 4
    assert body[0]["created_at"] == "2020-07-09T20:11:00"
    _, kwargs = calls[0]
    assert kwargs == {"topic": None, "sort_by": "created_at", "order": "desc", "limit": None, "offset": 0}


def test_list_articles_passes_sort_order_and_topic(client, fake_async):
    calls = fake_async(article_repository, "list_articles", [_summary(1)])

    resp = client.get("/api/articles", params={"sort_by": "title", "order": "ASC", "topic": "mitch"})

    assert resp.status_code == 200
    _, kwargs = calls[0]
    assert kwargs["sort_by"] == "title"
    assert kwargs["order"] == "asc"
    assert kwargs["topic"] == "mitch"


def test_list_articles_rejects_unknown_sort_column(client, fake_async):
    calls = fake_async(article_repository, "list_articles", [])

    resp = client.get("/api/articles", params={"sort_by": "mongolia"})

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid sort query"}
    assert calls == []


def test_list_articles_rejects_sql_in_sort_column(client, fake_async):
    calls = fake_async(article_repository, "list_articles", [])

    resp = client.get("/api/articles", params={"sort_by": "votes; DROP TABLE articles"})

    assert resp.status_code == 400
    assert calls == []


def test_list_articles_rejects_unknown_order(client, fake_async):
    fake_async(article_repository, "list_articles", [])

    resp = client.get("/api/articles", params={"sort_by": "title", "order": "trebuchet"})

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid order query"}


def test_list_articles_unknown_topic_is_404(client, fake_async):
    fake_async(article_repository, "list_articles", [])
    fake_async(topic_repository, "topic_exists", False)

    resp = client.get("/api/articles", params={"topic": "roast-chicken"})

    assert resp.status_code == 404
    assert resp.json() == {"msg": "Topic not found"}


def test_list_articles_existing_topic_without_articles_is_empty(client, fake_async):
    fake_async(article_repository, "list_articles", [])
    checks = fake_async(topic_repository, "topic_exists", True)

    resp = client.get("/api/articles", params={"topic": "paper"})

    assert resp.status_code == 200
    assert resp.json() == []
    assert checks == [(("paper",), {})]


def test_list_articles_pagination_translates_to_offset(client, fake_async):
    calls = fake_async(article_repository, "list_articles", [_summary(1)])

    resp = client.get("/api/articles", params={"limit": 5, "p": 3})

    assert resp.status_code == 200
    _, kwargs = calls[0]
    assert kwargs["limit"] == 5
    assert kwargs["offset"] == 10


@pytest.mark.parametrize("params", [{"limit": "ten"}, {"limit": 0}, {"limit": 101}, {"limit": 5, "p": 0}])
def test_list_articles_rejects_bad_pagination(client, fake_async, params):
    fake_async(article_repository, "list_articles", [])

    resp = client.get("/api/articles", params=params)

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}


def test_get_article_includes_body_and_comment_count(client, fake_async):
    fake_async(article_repository, "get_article", article_row(1, comment_count=11))

    resp = client.get("/api/articles/1")

    assert resp.status_code == 200
    article = resp.json()["article"]
    assert article["article_id"] == 1
    assert article["body"] == "I find this existence challenging"
    assert article["comment_count"] == 11


def test_get_article_missing_is_404(client, fake_async):
    fake_async(article_repository, "get_article", None)

    resp = client.get("/api/articles/9999")

    assert resp.status_code == 404
    assert resp.json() == {"msg": "Article ID not found"}


@pytest.mark.parametrize("article_id", ["hamsandwich", "1.5", "99999999999"])
def test_get_article_invalid_id_is_400(client, fake_async, article_id):
    calls = fake_async(article_repository, "get_article", None)

    resp = client.get(f"/api/articles/{article_id}")

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}
    assert calls == []


def test_patch_article_increments_votes(client, fake_async):
    calls = fake_async(article_repository, "increment_votes", lambda article_id, inc: article_row(article_id, votes=100 + inc))

    resp = client.patch("/api/articles/1", json={"inc_votes": 2, "extra": "ignored"})

    assert resp.status_code == 201
    assert resp.json()["updated_article"]["votes"] == 102
    assert calls == [((1, 2), {})]


def test_patch_article_missing_is_404(client, fake_async):
    fake_async(article_repository, "increment_votes", None)

    resp = client.patch("/api/articles/9999", json={"inc_votes": 2})

    assert resp.status_code == 404
    assert resp.json() == {"msg": "Entry not found"}


@pytest.mark.parametrize(
    "payload",
    [{"inc_votes": "ello"}, {}, {"votes": 1}, {"inc_votes": 1.5}, {"inc_votes": True}, {"inc_votes": False}],
)
def test_patch_article_bad_payload_is_400(client, fake_async, payload):
    calls = fake_async(article_repository, "increment_votes", None)

    resp = client.patch("/api/articles/1", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}
    assert calls == []


def test_patch_article_invalid_id_is_400(client, fake_async):
    fake_async(article_repository, "increment_votes", None)

    resp = client.patch("/api/articles/hamsandwich", json={"inc_votes": 2})

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}


def test_post_article_fills_default_image_and_zero_count(client, fake_async):
    def insert(**kwargs):
        return article_row(14, **kwargs, votes=0, comment_count=None)

    calls = fake_async(article_repository, "insert_article", insert)

    resp = client.post(
        "/api/articles",
        json={"author": "lurker", "title": "Cats at night", "body": "They prowl.", "topic": "cats"},
    )

    assert resp.status_code == 201
    article = resp.json()["article"]
    assert article["article_id"] == 14
    assert article["comment_count"] == 0
    assert article["article_img_url"] == article_service.DEFAULT_ARTICLE_IMG_URL
    assert calls[0][1]["topic"] == "cats"


def test_post_article_missing_field_is_400(client, fake_async):
    calls = fake_async(article_repository, "insert_article", None)

    resp = client.post("/api/articles", json={"author": "lurker", "title": "No body", "topic": "cats"})

    assert resp.status_code == 400
    assert calls == []


def test_delete_article(client, fake_async):
    fake_async(article_repository, "delete_article", True)

    resp = client.delete("/api/articles/2")

    assert resp.status_code == 204
    assert resp.content == b""


def test_delete_article_missing_is_404(client, fake_async):
    fake_async(article_repository, "delete_article", False)

    resp = client.delete("/api/articles/9999")

    assert resp.status_code == 404
    assert resp.json() == {"msg": "Article ID not found"}


def test_normalize_sort_defaults():
    assert article_service.normalize_sort(None, None) == ("created_at", "desc")
    assert article_service.normalize_sort("comment_count", " Asc ") == ("comment_count", "asc")


def test_normalize_sort_rejects_unlisted_values():
    with pytest.raises(HTTPException) as excinfo:
        article_service.normalize_sort("body", None)
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == "Invalid sort query"


def test_repository_refuses_unvalidated_sort():
    with pytest.raises(ValueError):
        asyncio.run(article_repository.list_articles(sort_by="body"))


def test_patch_article_bool_delta_never_reaches_repository(client, fake_async):
    calls = fake_async(article_repository, "increment_votes", lambda article_id, inc: article_row(article_id, votes=100 + inc))

    resp = client.patch("/api/articles/1", json={"inc_votes": True})

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Bad request"}
    assert calls == []


def test_list_articles_long_unknown_topic_is_404(client, fake_async):
    fake_async(article_repository, "list_articles", [])
    checks = fake_async(topic_repository, "topic_exists", False)
    topic = "x" * 101

    resp = client.get("/api/articles", params={"topic": topic})

    assert resp.status_code == 404
    assert resp.json() == {"msg": "Topic not found"}
    assert checks == [((topic,), {})]


@pytest.mark.parametrize("params", [{"order": "descendingly"}, {"sort_by": "title", "order": "a" * 50}])
def test_list_articles_long_order_is_invalid_order(client, fake_async, params):
    fake_async(article_repository, "list_articles", [])

    resp = client.get("/api/articles", params=params)

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid order query"}


def test_list_articles_long_sort_by_is_invalid_sort(client, fake_async):
    fake_async(article_repository, "list_articles", [])

    resp = client.get("/api/articles", params={"sort_by": "c" * 150})

    assert resp.status_code == 400
    assert resp.json() == {"msg": "Invalid sort query"}


def test_post_article_long_unknown_author_reaches_database(client, fake_async):
    calls = fake_async(
        article_repository,
        "insert_article",
        asyncpg.exceptions.ForeignKeyViolationError("violates foreign key constraint"),
    )

    resp = client.post(
        "/api/articles",
        json={"author": "a" * 101, "title": "Long", "body": "Names", "topic": "t" * 101},
    )

    assert resp.status_code == 404
    assert resp.json() == {"msg": "Entry not found"}
    assert len(calls) == 1
