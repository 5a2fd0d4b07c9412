from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from api.exception_handlers import register_exception_handlers
from api.main import api_router
from api.middleware.access_log import AccessLogMiddleware
from core.settings import settings
from core.db import connect_db

@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    # raising here aborts startup before uvicorn binds the port
    engine = connect_db(settings.CONNECTION_STRING)
    fastapi_app.state.engine = engine
    yield
    engine.dispose()

app = FastAPI(lifespan=lifespan)

if settings.RESTRICT_HOSTS:
    app.add_middleware(
        TrustedHostMiddleware, allowed_hosts=settings.TRUSTED_HOSTS,
    )

app.add_middleware(AccessLogMiddleware)
register_exception_handlers(app)

app.include_router(api_router)

def serve() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, access_log=False)

if __name__ == "__main__":
    serve()
