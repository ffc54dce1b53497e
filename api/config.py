"""
API configuration settings.
"""

from pathlib import Path
from typing import Optional

from pydantic import validator
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class APIConfig(BaseSettings):
    """
    API configuration settings.
    Values come from environment variables or a local .env file.
    """

    # API Settings
    api_title: str = "Ebooks Catalog API"
    api_version: str = "1.0.0"
    api_description: str = "Read-only catalog of authors and their published works"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    # Catalog Settings
    data_file: str = str(PROJECT_ROOT / "data" / "ebooks.json")

    # Static Assets
    static_dir: str = str(PROJECT_ROOT / "public")
    not_found_page: str = "404.html"

    # CORS Settings
    cors_origins: list = ["*"]
    cors_allow_methods: list = ["GET"]
    cors_allow_headers: list = ["*"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None

    @validator('port')
    def validate_port(cls, v):
        """Ensure port is a valid TCP port."""
        if v < 1 or v > 65535:
            raise ValueError('port must be between 1 and 65535')
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    @validator('log_format')
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ['json', 'console']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of: {valid_formats}')
        return v.lower()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"  # Ignore extra fields from .env
    }

    def get_data_file_path(self) -> Path:
        """Get catalog data file as Path object."""
        return Path(self.data_file)

    def get_static_dir_path(self) -> Path:
        """Get static asset directory as Path object."""
        return Path(self.static_dir)

    def get_not_found_page_path(self) -> Path:
        """Get the document served for unmatched routes."""
        return self.get_static_dir_path() / self.not_found_page

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path as Path object."""
        if self.log_file:
            return Path(self.log_file)
        return None


# Global config instance
config = APIConfig()
