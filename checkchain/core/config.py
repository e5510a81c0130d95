from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Service
    SERVICE_NAME: str = "checkchain"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)
    
    # Validation
    DEFAULT_ERROR_TEMPLATE: str = "invalid value for {name}"
    CHECK_TIMEOUT_SECONDS: float | None = None  # None or <= 0 disables the bound
    
    @property
    def check_timeout(self) -> float | None:
        if self.CHECK_TIMEOUT_SECONDS is None or self.CHECK_TIMEOUT_SECONDS <= 0:
            return None
        return self.CHECK_TIMEOUT_SECONDS
    
    def default_message(self, field_name: str) -> str:
        return self.DEFAULT_ERROR_TEMPLATE.format(name=field_name)
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
