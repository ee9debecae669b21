import time

import pytest
from fastapi.testclient import TestClient

from postboard.core.config import Settings
from postboard.main import create_app
from postboard.services.seeding import seed_store

NESTED_QUERY = "{ posts { id comments { id text createdAt author { name } } } }"

COMMENTS_PER_POST = 3


@pytest.fixture
def populated_store(store):
    for post in store.posts:
        for i in range(COMMENTS_PER_POST):
            store.add_comment(post_id=post.id, user_id=(post.id + i) % 3 + 1, text=f"{post.id}-{i}")
    store.reset_stats()
    return store


def _run(store, batch_loading):
    settings = Settings(resolver_delay_ms=0, batch_loading=batch_loading)
    with TestClient(create_app(settings=settings, store=store)) as c:
        resp = c.post("/graphql", json={"query": NESTED_QUERY})
    assert resp.status_code == 200
    return resp.content


def test_naive_loading_hits_store_per_row(populated_store):
    n = len(populated_store.posts)
    _run(populated_store, batch_loading=False)

    accesses = populated_store.accesses
    assert accesses["comments_for_post"] == n
    assert accesses["find_user_by_id"] == n * COMMENTS_PER_POST
    assert accesses["comments_for_post"] + accesses["find_user_by_id"] >= n + n * COMMENTS_PER_POST


def test_batched_loading_groups_store_access(populated_store):
    n = len(populated_store.posts)
    _run(populated_store, batch_loading=True)

    accesses = populated_store.accesses
    assert accesses["comments_for_post"] == 0
    assert accesses["find_user_by_id"] == 0
    assert accesses["comments_for_posts"] == 1
    assert 1 <= accesses["users_by_ids"] <= n
    relation_accesses = populated_store.access_count - accesses["all_posts"]
    assert relation_accesses <= n + 1


def test_batched_and_naive_responses_are_identical(populated_store):
    naive = _run(populated_store, batch_loading=False)
    batched = _run(populated_store, batch_loading=True)
    assert naive == batched


def test_comment_count_batched_matches_naive(populated_store):
    query = "{ posts { commentCount comments { id } } }"
    results = []
    for batch_loading in (False, True):
        settings = Settings(resolver_delay_ms=0, batch_loading=batch_loading)
        with TestClient(create_app(settings=settings, store=populated_store)) as c:
            results.append(c.post("/graphql", json={"query": query}).json())

    assert results[0] == results[1]
    for post in results[1]["data"]["posts"]:
        assert post["commentCount"] == len(post["comments"]) == COMMENTS_PER_POST


def _timed_nested_query(comments_per_post, batch_loading, delay_ms=20):
    store = seed_store()
    for post in store.posts:
        for i in range(comments_per_post):
            store.add_comment(post_id=post.id, user_id=i % 3 + 1, text=f"{post.id}-{i}")

    settings = Settings(resolver_delay_ms=delay_ms, batch_loading=batch_loading)
    with TestClient(create_app(settings=settings, store=store)) as c:
        started = time.perf_counter()
        resp = c.post("/graphql", json={"query": "{ posts { id comments { id author { name } } } }"})
        elapsed = time.perf_counter() - started
    assert resp.status_code == 200
    assert "errors" not in resp.json()
    return elapsed


def test_naive_latency_grows_with_comments_per_post():
    # 3 posts: 3 comment lookups + 3*M author lookups, 20ms each
    few = _timed_nested_query(1, batch_loading=False)
    many = _timed_nested_query(5, batch_loading=False)
    assert few >= 6 * 0.02
    assert many >= 18 * 0.02
    assert many > few + 6 * 0.02


def test_batched_latency_stays_flat():
    many_naive = _timed_nested_query(5, batch_loading=False)
    many_batched = _timed_nested_query(5, batch_loading=True)
    assert many_batched < 10 * 0.02
    assert many_batched < many_naive / 2
