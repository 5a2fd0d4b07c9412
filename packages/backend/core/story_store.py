import logging
from datetime import datetime, timezone
from typing import Any, Mapping

import pydantic
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from core.errors import PersistenceError, ValidationError
from models.story import StoryCreate, StoryRecord
from models.tables.story import Story

logger = logging.getLogger('uvicorn.error')

def validate_story_input(data: StoryCreate | Mapping[str, Any] | Any) -> StoryCreate:
    """Check a candidate story for presence and type of its fields.

    Raises ValidationError when the title is missing or empty, or when a
    field has the wrong type.
    """
    if isinstance(data, StoryCreate):
        data = data.model_dump()

    try:
        return StoryCreate.model_validate(data)
    except pydantic.ValidationError as e:
        # the rejected input may be a non-finite float that JSON cannot carry
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in e.errors(include_url=False)
        ]
        raise ValidationError("Invalid story", errors=errors) from e


class StoryStore:
    """Create and list stories over a database engine.

    One session is opened per operation, nothing is cached between calls.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def create_story(self, data: StoryCreate | Mapping[str, Any]) -> StoryRecord:
        story_in = validate_story_input(data)

        now = datetime.now(timezone.utc)
        story = Story(
            title=story_in.title,
            effort=story_in.effort,
            done=bool(story_in.done),
            created_at=now,
            updated_at=now,
        )

        try:
            with Session(self.engine) as session:
                session.add(story)
                session.commit()
                session.refresh(story)
                record = StoryRecord.from_row(story)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save story: {e}")
            raise PersistenceError("Failed to save story") from e

        logger.debug(f"Created story {record.id}")
        return record

    def get_stories(self) -> list[StoryRecord]:
        try:
            with Session(self.engine) as session:
                results = session.exec(select(Story))
                return [StoryRecord.from_row(story) for story in results.all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to list stories: {e}")
            raise PersistenceError("Failed to list stories") from e
