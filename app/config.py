"""Application settings loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API (bind host is prefixed: shells export a generic HOST)
    host: str = Field(default="0.0.0.0", validation_alias="ENVSERVE_HOST")
    port: int = 3000

    # Database (optional — nothing connects yet)
    database_host: str | None = None
    database_name: str | None = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_ignore_empty = True

    def database_options(self) -> dict:
        """Database connection options as read from the environment."""
        return {
            "host": self.database_host,
            "database": self.database_name,
        }


settings = Settings()
