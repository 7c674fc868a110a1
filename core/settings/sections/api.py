from typing import List

from pydantic_settings import SettingsConfigDict

from core.settings.base import OrderingBaseSettings


class ApiSettings(OrderingBaseSettings):
    """
    HTTP API and logging settings.
    Loaded automatically from .env with prefix API_*
    """

    title: str = "Order Processing API"
    version: str = "1.0.0"
    environment: str = "production"

    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"
