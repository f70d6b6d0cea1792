"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables rather than through ``pydantic_settings``.
Defaults are provided for all fields, so the service starts with no
environment at all; override values per deployment as needed.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Address Book API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Comma‑separated list of address book names created when the
    # application starts, e.g. DEFAULT_ADDRESS_BOOKS="Personal,Work".
    default_address_books: str = os.getenv("DEFAULT_ADDRESS_BOOKS", "")

    def default_book_names(self) -> List[str]:
        """Return the configured default book names, blanks removed."""
        return [name.strip() for name in self.default_address_books.split(",") if name.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
