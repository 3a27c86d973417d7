from jsonconf.components.config_store import ConfigStore
from jsonconf.components.defaults import DEFAULT_DATA, get_default_data
from jsonconf.components.errors import (
    ConfigReadError,
    ConfigStoreError,
    ConfigWriteError,
    KeyMissingError,
    TypeMismatchError,
)
from jsonconf.components.values import ConfigValue, ValueKind, kind_of

__all__ = [
    "ConfigStore",
    "DEFAULT_DATA",
    "get_default_data",
    "ConfigStoreError",
    "ConfigReadError",
    "ConfigWriteError",
    "KeyMissingError",
    "TypeMismatchError",
    "ConfigValue",
    "ValueKind",
    "kind_of",
]
