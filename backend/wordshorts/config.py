"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
"""

import os
from pathlib import Path

DEFAULT_VOCAB_API_BASE = "https://word-shorts-api.kirklayer6590.workers.dev"


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins from environment.

    Environment variable: CORS_ORIGINS (comma-separated)
    Default: localhost ports 3000 and 5173 for development
    """
    default_origins = "http://localhost:3000,http://localhost:5173"
    origins_str = os.getenv("CORS_ORIGINS", default_origins)
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def get_cors_allow_credentials() -> bool:
    """Get CORS allow_credentials setting.

    Environment variable: CORS_ALLOW_CREDENTIALS
    Default: true for development
    """
    return os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


# Restricted HTTP methods - only what the API actually uses
CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "OPTIONS"]

CORS_ALLOWED_HEADERS = [
    "Accept",
    "Accept-Language",
    "Content-Type",
]


def get_vocab_api_base() -> str:
    """Get the remote vocabulary API base URL.

    Environment variable: VOCAB_API_BASE
    """
    return os.getenv("VOCAB_API_BASE", DEFAULT_VOCAB_API_BASE).rstrip("/")


def get_vocab_api_timeout() -> float:
    """Get the HTTP timeout for vocabulary requests, in seconds.

    Environment variable: VOCAB_API_TIMEOUT
    Default: 10 seconds
    """
    return float(os.getenv("VOCAB_API_TIMEOUT", "10.0"))


def get_catalog_adapter_type() -> str:
    """Get catalog adapter type from environment.

    Options:
        - 'remote': Use the vocabulary HTTP API (default)
        - 'local': Use the embedded word list (no network required)
    """
    return os.getenv("CATALOG_ADAPTER", "remote").lower()


def get_deck_store_type() -> str:
    """Get deck persistence backend from environment.

    Options:
        - 'sqlite': Persist decks in a SQLite file (default)
        - 'memory': Keep decks in process memory only
    """
    return os.getenv("DECK_STORE", "sqlite").lower()


def get_deck_db_path() -> str:
    """Get deck database path from environment."""
    default_path = str(Path.home() / ".wordshorts" / "decks.db")
    return os.getenv("DECK_DB_PATH", default_path)


def get_default_deck_name() -> str:
    return os.getenv("DEFAULT_DECK_NAME", "기본 영단어")


def get_default_deck_description() -> str:
    return os.getenv("DEFAULT_DECK_DESCRIPTION", "Word Shorts 기본 단어장")


def get_list_overscan() -> int:
    """Rows rendered beyond each edge of a list viewport.

    Environment variable: LIST_OVERSCAN
    Default: 10
    """
    return int(os.getenv("LIST_OVERSCAN", "10"))


def get_list_row_height() -> float:
    """Estimated list row height in pixels.

    Environment variable: LIST_ROW_HEIGHT
    Default: 48
    """
    return float(os.getenv("LIST_ROW_HEIGHT", "48"))


def get_api_host() -> str:
    return os.getenv("API_HOST", "127.0.0.1")


def get_api_port() -> int:
    """Port for `python -m wordshorts.app`.

    Environment variable: API_PORT
    Default: 8000
    """
    return int(os.getenv("API_PORT", "8000"))
