from pydantic_settings import BaseSettings, SettingsConfigDict


class AdminFeedConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ADMIN_FEED_")

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    default_page_size: int = 20
    max_page_size: int = 100
