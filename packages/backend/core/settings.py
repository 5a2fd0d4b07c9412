from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # SQLAlchemy url of the story database, left empty the driver will refuse it
    CONNECTION_STRING: str = ""
    DB_CONNECT_TIMEOUT: int = 5
    DB_ECHO: bool = False

    # listener
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # prevent unauthorized access
    RESTRICT_HOSTS: bool = False
    TRUSTED_HOSTS: Annotated[List[str], NoDecode] = []

    @field_validator('TRUSTED_HOSTS', mode='before')
    @classmethod
    def decode_trusted_hosts(cls, raw: str | list[str]) -> list[str]:
        if type(raw) is str:
            return [host.strip() for host in raw.split(',') if host.strip()]
        else:
            return raw

settings = Settings()  # type: ignore
