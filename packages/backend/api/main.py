from fastapi import APIRouter

from api.routes import root, stories

api_router = APIRouter()
api_router.include_router(root.router)
api_router.include_router(stories.router)
