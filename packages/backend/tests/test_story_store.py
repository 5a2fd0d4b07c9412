"""
Story store tests, run against in-memory SQLite.
"""

from datetime import timedelta

import pytest
from sqlmodel import SQLModel

from core.errors import PersistenceError, ValidationError
from models.story import StoryCreate


def test_get_stories_empty(store):
    assert store.get_stories() == []


def test_create_story_defaults(store):
    record = store.create_story({"title": "Write spec"})

    assert record.title == "Write spec"
    assert record.effort is None
    assert record.done is False
    assert record.id is not None
    assert record.created_at == record.updated_at


def test_create_then_list_returns_the_new_story(store):
    created = store.create_story({"title": "Ship it", "effort": 3, "done": True})

    stories = store.get_stories()

    assert len(stories) == 1
    assert stories[0].id == created.id
    assert stories[0].title == "Ship it"
    assert stories[0].effort == 3
    assert stories[0].done is True


def test_create_story_accepts_model_input(store):
    record = store.create_story(StoryCreate(title="From model", effort=1.5))

    assert record.effort == 1.5


def test_null_done_is_stored_as_false(store):
    store.create_story({"title": "Nullable", "done": None})

    assert store.get_stories()[0].done is False


@pytest.mark.parametrize("payload", [
    {},
    {"title": ""},
    {"title": None},
    {"effort": 3},
    {"title": "Bad effort", "effort": "a lot"},
    ["not", "an", "object"],
    {"title": "Endless", "effort": "Infinity"},
    {"title": "Unknown", "effort": "NaN"},
    {"title": "Overflow", "effort": float("inf")},
])
def test_invalid_story_is_rejected_and_not_persisted(store, payload):
    with pytest.raises(ValidationError) as exc_info:
        store.create_story(payload)

    assert exc_info.value.errors
    assert store.get_stories() == []


def test_ids_unique_and_creation_time_non_decreasing(store):
    first = store.create_story({"title": "first"})
    second = store.create_story({"title": "second"})
    third = store.create_story({"title": "third"})

    assert len({first.id, second.id, third.id}) == 3
    assert first.created_at <= second.created_at <= third.created_at


def test_storage_failure_raises_persistence_error(engine, store):
    SQLModel.metadata.drop_all(engine)

    with pytest.raises(PersistenceError):
        store.get_stories()

    with pytest.raises(PersistenceError):
        store.create_story({"title": "lost"})


def test_record_serializes_with_wire_names(store):
    record = store.create_story({"title": "Wire"})

    payload = record.model_dump(mode="json", by_alias=True)

    assert set(payload) == {"_id", "title", "effort", "done", "createdAt", "updatedAt"}
    assert payload["_id"] == str(record.id)


def test_timestamps_are_timezone_aware(store):
    created = store.create_story({"title": "Aware"})
    listed = store.get_stories()[0]

    for record in (created, listed):
        assert record.created_at.tzinfo is not None
        assert record.updated_at.tzinfo is not None
        assert record.created_at.utcoffset() == timedelta(0)


def test_whole_number_effort_stays_an_integer(store):
    store.create_story({"title": "Whole", "effort": 5})
    store.create_story({"title": "Fraction", "effort": 2.5})

    efforts = {story.title: story.effort for story in store.get_stories()}

    assert efforts["Whole"] == 5
    assert isinstance(efforts["Whole"], int)
    assert efforts["Fraction"] == 2.5
