from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="CRPT_", extra="ignore"
    )

    # App
    environment: str = "development"
    log_level: str = "INFO"

    # CRPT API
    api_url: str = "https://ismp.crpt.ru"
    create_document_path: str = "/api/v3/lk/documents/create"
    request_timeout: float = 3.0

    # Lifecycle
    shutdown_timeout: float = 5.0


settings = Settings()


def get_settings() -> Settings:
    return settings
