"""
Query Engine Configuration
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Input bounds
    max_query_length: int = 1024
    max_nesting_depth: int = 100

    # Result display
    calculator_precision: int = 6
    converter_precision: int = 4

    # Web search
    default_search_engine: str = "google"

    # Logging
    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_prefix = "QUERY_ENGINE_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
