from fastapi import APIRouter
from starlette import status

from models.message import Message

router = APIRouter(tags=["root"])

@router.get("/", status_code=status.HTTP_203_NON_AUTHORITATIVE_INFORMATION)
async def root() -> Message:
    return Message(message="serwas")
