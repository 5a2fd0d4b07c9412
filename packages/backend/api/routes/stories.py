from typing import Annotated, Any

from fastapi import APIRouter, Body, Response
from fastapi.concurrency import run_in_threadpool
from starlette import status

from api.dependencies.logger import LoggerDep
from api.dependencies.story_store import StoryStoreDep
from models.story import StoryRecord

router = APIRouter(prefix="/stories", tags=["stories"])

@router.post("", status_code=status.HTTP_201_CREATED)
async def post_story(
        story: Annotated[Any, Body()],
        store: StoryStoreDep,
        logger: LoggerDep,
) -> Response:
    # the store validates the payload itself, errors are mapped by the app handlers
    record = await run_in_threadpool(store.create_story, story)
    logger.info(f"Story {record.id} created")

    return Response(status_code=status.HTTP_201_CREATED)

@router.get("", response_model=list[StoryRecord])
async def get_stories(
        store: StoryStoreDep,
):
    return await run_in_threadpool(store.get_stories)
