from typing import Annotated

from fastapi import Depends, Request

from core.story_store import StoryStore

def get_story_store(request: Request) -> StoryStore:
    # engine is attached to the app once the lifespan connected to the database
    return StoryStore(request.app.state.engine)

StoryStoreDep = Annotated[StoryStore, Depends(get_story_store)]
