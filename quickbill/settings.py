import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="QUICKBILL_", extra="ignore")

    api_base: str = "http://localhost:8080/"
    api_path: str = "api/bills"

    log_level: str = "INFO"
    log_json: bool = False

    @property
    def bills_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/{self.api_path.strip('/')}"


settings = Settings()
