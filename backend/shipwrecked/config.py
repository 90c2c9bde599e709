"""Application configuration using Pydantic settings."""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    environment: str = "development"

    # Security
    session_token_salt: str

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:3001"

    # Hackatime (external time tracking)
    hackatime_api_url: str = "https://hackatime.hackclub.com/api/v1"
    hackatime_api_token: Optional[str] = None
    hackatime_timeout_seconds: float = 10.0

    # Progress / shells
    shells_per_hour: float = 10.0
    progress_goal_hours: float = 60.0

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
