# Standard library imports
import os
from typing import Dict, Final, List, Optional
from dotenv import load_dotenv

from posts_api.infrastructure.http.client import UpstreamClientConfig


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()
        
        # Application Metadata
        self.project_name: Final[str] = os.getenv("PROJECT_NAME", "Posts API")
        self.api_version: Final[str] = os.getenv("API_VERSION", "1.0.0")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_file: Final[Optional[str]] = os.getenv("LOG_FILE") or None
        
        # Upstream API Configuration
        self.upstream_base_url: Final[str] = os.getenv(
            "UPSTREAM_BASE_URL",
            "https://jsonplaceholder.typicode.com/"
        )
        self.upstream_timeout_seconds: Final[float] = float(
            os.getenv("UPSTREAM_TIMEOUT_SECONDS", "30")
        )
        self.upstream_user_agent: Final[str] = os.getenv("UPSTREAM_USER_AGENT", "posts-api/1.0")
        
        # Response Shaping
        # Author name used when a post's userId matches no user
        self.unknown_author_name: Final[str] = os.getenv("UNKNOWN_AUTHOR_NAME", "Unknown")
        
        # HTTP Surface
        self.api_prefix: Final[str] = os.getenv("API_PREFIX", "").rstrip("/")
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    
    def upstream_headers(self) -> Dict[str, str]:
        """Default headers sent with every upstream request."""
        return {
            "Accept": "application/json",
            "User-Agent": self.upstream_user_agent,
        }
    
    def upstream_config(self) -> UpstreamClientConfig:
        """Build the read-only upstream client configuration."""
        return UpstreamClientConfig(
            base_url=self.upstream_base_url,
            timeout_seconds=self.upstream_timeout_seconds,
            headers=self.upstream_headers(),
        )


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
