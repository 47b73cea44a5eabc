"""
Centralized configuration management for the context runtime.
Loads environment variables and provides default configurations.
"""

import logging
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Runtime settings and configuration."""

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", '%(asctime)s [%(levelname)s] (%(name)s) %(message)s')
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")

    # Snapshot serialization
    SNAPSHOT_ENCODING: str = os.getenv("SNAPSHOT_ENCODING", "utf-8")
    SNAPSHOT_INDENT: Optional[str] = os.getenv("SNAPSHOT_INDENT")

    @classmethod
    def snapshot_indent(cls) -> Optional[int]:
        """Indentation for serialized snapshots, None for compact output."""
        if not cls.SNAPSHOT_INDENT:
            return None
        return int(cls.SNAPSHOT_INDENT)

    @classmethod
    def validate(cls) -> None:
        """Validate that all settings hold usable values."""
        invalid_settings = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            invalid_settings.append(("LOG_LEVEL", cls.LOG_LEVEL))

        if cls.SNAPSHOT_INDENT:
            try:
                int(cls.SNAPSHOT_INDENT)
            except ValueError:
                invalid_settings.append(("SNAPSHOT_INDENT", cls.SNAPSHOT_INDENT))

        try:
            "".encode(cls.SNAPSHOT_ENCODING)
        except LookupError:
            invalid_settings.append(("SNAPSHOT_ENCODING", cls.SNAPSHOT_ENCODING))

        if invalid_settings:
            details = ', '.join(f"{name}={value!r}" for name, value in invalid_settings)
            raise ValueError(f"Invalid settings: {details}")

# Global settings instance
settings = Settings()
