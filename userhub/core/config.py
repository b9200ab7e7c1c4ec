# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Environment
        self.environment: Final[str] = os.getenv("ENVIRONMENT", "development")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "userhub")
        self.mongo_user_collection: Final[str] = os.getenv("MONGO_USER_COLLECTION", "users")

        # Password hashing
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Rate usage accounting (fixed window per client)
        self.rate_limit_window_seconds: Final[int] = int(
            os.getenv("RATE_LIMIT_WINDOW_SECONDS", "300")
        )
        self.rate_limit_max_requests: Final[int] = int(
            os.getenv("RATE_LIMIT_MAX_REQUESTS", "10000")
        )

        # HTTP / GraphQL
        self.graphql_path: Final[str] = os.getenv("GRAPHQL_PATH", "/graphql")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.port: Final[int] = int(os.getenv("PORT", "4000"))

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
