import logging

from sqlalchemy import Engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, SQLModel

from core.errors import ConfigurationError
from core.settings import settings
import models  # noqa: F401  registers the tables on SQLModel.metadata

logger = logging.getLogger('uvicorn.error')

def create_db_engine(connection_string: str) -> Engine:
    try:
        url = make_url(connection_string)
    except ArgumentError as e:
        raise ConfigurationError(f"Invalid connection string: {e}") from e

    if url.get_backend_name() == "sqlite":
        options = {"connect_args": {"check_same_thread": False}}
        # in-memory databases only live as long as their single connection
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
    else:
        options = {
            "pool_pre_ping": True,  # Enable connection health checks
            "connect_args": {"connect_timeout": settings.DB_CONNECT_TIMEOUT},
        }

    try:
        return create_engine(url, echo=settings.DB_ECHO, **options)
    except (ArgumentError, ImportError) as e:
        raise ConfigurationError(f"Cannot create engine for {url.render_as_string()}: {e}") from e

def init_db(engine: Engine) -> None:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as e:
        raise ConfigurationError(f"Cannot connect to the database: {e}") from e

    logger.info("Connected to DB")

def connect_db(connection_string: str) -> Engine:
    engine = create_db_engine(connection_string)
    init_db(engine)
    return engine
