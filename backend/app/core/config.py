"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    APP_NAME: str = "Tripsplit"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]
    
    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
    
    # Currency used when a trip snapshot does not name one
    DEFAULT_CURRENCY: str = "EUR"
    
    @field_validator("DEFAULT_CURRENCY")
    @classmethod
    def normalize_currency(cls, v):
        """Currency codes are stored upper-case."""
        return v.strip().upper()
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
