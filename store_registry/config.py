"""
Design (config.py)
- Purpose: Centralize constants and runtime configuration.
- Inputs: Environment variables and an optional .env file (AppConfig only).
- Outputs: Constants (file name, CLI flag, menu text, filter thresholds) and get_config().
- Side effects: get_config() reads the environment once and caches the result.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Persistence: filename for saved store list (path resolved in storage module)
STORES_FILENAME = "stores.dat"
STORAGE_FORMAT_VERSION = 1

# Command-line switch for the scripted, non-interactive run
AUTO_FLAG = "-auto"

# Store appended on every automation run
AUTO_STORE_NAME = "AutoStore"
AUTO_STORE_ADDRESS = "AutoAddress"
AUTO_STORE_SPECIALIZATION = "AutoSpecialization"
AUTO_STORE_WORKING_HOURS = "24/7"

## Filter query thresholds
CONTINUOUS_HOURS = "24/7"         # compared case-insensitively
SHORT_PHONE_MAX_LEN = 5           # a phone shorter than this is "short"
DOMESTIC_MOBILE_PREFIX = "380"    # literal prefix, no format validation

MENU_LINES = [
    "Menu:",
    "1. Add a new store",
    "2. View list of stores",
    "3. Delete a store by name",
    "4. Find specific stores",
    "5. Exit program",
]


class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    """
    stores_file: str = STORES_FILENAME
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def set_config_for_test(**kwargs) -> None:
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
