"""
Environment variable loader for the goal services.
Loads .env files and exposes typed accessors for the settings the services use.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


DEFAULT_USERS_COLLECTION = "users"
DEFAULT_IMPORT_MAX_BYTES = 5 * 1024 * 1024


class EnvironmentError(Exception):
    """Raised when required environment variables are missing or invalid."""
    pass


def load_environment(env_file: Optional[str] = None) -> bool:
    """
    Load environment variables from a .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env at the project root.

    Returns:
        True if a file was loaded
    """
    if env_file is None:
        env_path = Path(__file__).parent.parent.parent / ".env"
    else:
        env_path = Path(env_file)

    if env_path.exists():
        load_dotenv(env_path)
        return True
    # In production the variables are set by the runtime
    return False


def get_optional_env_var(name: str, default: str = "", description: str = "") -> str:
    """Get an optional environment variable with a default value."""
    return os.getenv(name, default)


def get_environment() -> str:
    return get_optional_env_var("ENV", "development", "Runtime environment")


def is_emulator() -> bool:
    return get_optional_env_var("FUNCTIONS_EMULATOR") == "true"


def get_users_collection() -> str:
    return get_optional_env_var(
        "ONEGOAL_USERS_COLLECTION",
        DEFAULT_USERS_COLLECTION,
        "Firestore collection holding one state document per user",
    )


def get_import_max_bytes() -> int:
    raw = get_optional_env_var("ONEGOAL_IMPORT_MAX_BYTES", "")
    if not raw:
        return DEFAULT_IMPORT_MAX_BYTES
    try:
        value = int(raw)
    except ValueError as e:
        raise EnvironmentError(
            f"ONEGOAL_IMPORT_MAX_BYTES must be an integer, got {raw!r}"
        ) from e
    if value <= 0:
        raise EnvironmentError("ONEGOAL_IMPORT_MAX_BYTES must be positive")
    return value
