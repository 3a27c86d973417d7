# config/config.py
import os

from dotenv import load_dotenv

load_dotenv()

CONFIG_PATH_ENV = "CONFIG_PATH"
DEFAULT_CONFIG_FILE = "config.json"

LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_FILE_PATH_ENV = "LOG_FILE_PATH"


def resolve_config_path(explicit: str | None = None) -> str:
    # explicit path > CONFIG_PATH > ./config.json
    if explicit:
        return explicit
    return os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_FILE


def log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "INFO").upper()


def log_file_path() -> str | None:
    return os.getenv(LOG_FILE_PATH_ENV) or None
