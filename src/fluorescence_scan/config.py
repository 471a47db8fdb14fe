"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_ASYNC_DRIVERS = {"mysql": "mysql+aiomysql", "mariadb": "mariadb+aiomysql"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str
    s3_bucket: str
    s3_endpoint_url: str | None = None
    s3_access_key_id: str | None = None
    s3_secret_access_key: str | None = None
    s3_force_path_style: bool = False
    s3_region: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def async_database_url(raw: str) -> str:
    """Swap a bare ``mysql://`` URL for its async driver equivalent."""
    url = make_url(raw)
    driver = _ASYNC_DRIVERS.get(url.drivername)
    if driver is None:
        return raw
    return url.set(drivername=driver).render_as_string(hide_password=False)
