"""Configuration package."""

from .env_loader import (
    EnvironmentError,
    load_environment,
    get_optional_env_var,
    get_environment,
    is_emulator,
    get_users_collection,
    get_import_max_bytes,
)

__all__ = [
    "EnvironmentError",
    "load_environment",
    "get_optional_env_var",
    "get_environment",
    "is_emulator",
    "get_users_collection",
    "get_import_max_bytes",
]
