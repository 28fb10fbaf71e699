from urllib.parse import quote_plus

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PostgresConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="POSTGRES_")

    host: str = "localhost"
    port: int = 5432
    database: str = "soteros"
    user: str = "postgres"
    password: str = "postgres"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def dsn(self) -> str:
        return (
            f"postgresql://{quote_plus(self.user)}:{quote_plus(self.password)}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class FrontendConfig(BaseSettings):
    """Base URL of the web frontend, used to build action links."""

    model_config = SettingsConfigDict(env_prefix="FRONTEND_")

    url: str = "http://localhost:3000"

    def link(self, path: str) -> str:
        return f"{self.url.rstrip('/')}/{path.lstrip('/')}"
