"""Tests for the feedback store."""

import json

import pytest
from feedbackhub.services.feedback_store import FeedbackStore


@pytest.fixture
def store(tmp_path):
    store = FeedbackStore(f"sqlite:///{tmp_path / 'feedback.db'}")
    store.create_schema()
    return store


def test_add_and_fetch(store):
    first = store.add_feedback("workers", "email", "Fast deploys")
    second = store.add_feedback("workers", "discord", "Docs are vague")

    records = store.fetch_feedback("workers")
    assert [r.id for r in records] == [second, first]  # newest first
    assert records[0].source == "discord"
    assert records[0].created_at is not None
    assert records[1].to_item().comment == "Fast deploys"


def test_product_filter_is_case_insensitive(store):
    store.add_feedback("Workers", "email", "one")
    store.add_feedback("d1", "email", "two")

    assert [r.comment for r in store.fetch_feedback("WORKERS")] == ["one"]
    assert [r.comment for r in store.fetch_feedback("work")] == []
    assert len(store.fetch_feedback("all")) == 2
    assert len(store.fetch_feedback()) == 2


def test_list_products(store):
    store.seed([
        {"product": "r2", "source": "email", "comment": "a"},
        {"product": "d1", "source": "email", "comment": "b"},
        {"product": "r2", "source": "forum", "comment": "c"},
    ])
    assert store.list_products() == ["d1", "r2"]


def test_seed_rejects_missing_fields(store):
    with pytest.raises(ValueError, match="missing required fields"):
        store.seed([{"product": "r2", "comment": "no source"}])
    assert store.fetch_feedback() == []


def test_seed_empty(store):
    assert store.seed([]) == 0


def test_load_json(store, tmp_path):
    path = tmp_path / "feedback.json"
    path.write_text(json.dumps([
        {"product": "workers", "source": "email", "comment": "Great"},
        {"product": "d1", "source": "github", "comment": "Slow"},
    ]))
    assert store.load_json(str(path)) == 2
    assert store.list_products() == ["d1", "workers"]


def test_load_json_requires_array(store, tmp_path):
    path = tmp_path / "feedback.json"
    path.write_text(json.dumps({"product": "workers"}))
    with pytest.raises(ValueError, match="must contain a JSON array"):
        store.load_json(str(path))
