import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator

from models.tables.story import Story

# Body of POST /stories
class StoryCreate(BaseModel):
    title: str = Field(min_length=1)
    # integers stay integers, NaN and infinities are rejected
    effort: int | FiniteFloat | None = None
    # null is accepted on the wire but never stored
    done: bool | None = None

# A saved story as returned by GET /stories
class StoryRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID = Field(alias="_id")
    title: str
    effort: int | float | None = None
    done: bool = False
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator('effort')
    @classmethod
    def integral_effort(cls, effort: int | float | None) -> int | float | None:
        # the column is a float, whole numbers go back out as they came in
        if isinstance(effort, float) and effort.is_integer():
            return int(effort)
        return effort

    @field_validator('created_at', 'updated_at')
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # backends without timezone support (sqlite) hand back naive UTC values
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_row(cls, story: Story) -> "StoryRecord":
        return cls(
            id=story.id,
            title=story.title,
            effort=story.effort,
            done=story.done,
            created_at=story.created_at,
            updated_at=story.updated_at,
        )
