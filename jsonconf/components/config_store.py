# components/config_store.py
from __future__ import annotations
import copy
import json
import logging
import os
import tempfile
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from jsonconf.components.errors import (
    ConfigReadError,
    ConfigWriteError,
    KeyMissingError,
    TypeMismatchError,
)
from jsonconf.components.values import ConfigValue, ValueKind, kind_of
from jsonconf.config.config import resolve_config_path
from jsonconf.utils.decorators import best_effort
from jsonconf.utils.validators import check_key

logger = logging.getLogger(__name__)

_MISSING = object()


class ConfigStore:
    """Key-value settings kept in a single JSON file.

    Every accessor re-reads the file first, so edits made by other
    processes between calls are picked up. Nothing is locked: two writers
    interleaving read and write can still lose each other's updates.

    By default read and write problems are logged and swallowed (see
    ``last_error``); pass ``strict=True`` to have them raised instead.
    """

    def __init__(
        self,
        file_path: Optional[str] = None,
        defaults: Optional[Mapping[str, Any]] = None,
        strict: bool = False,
    ):
        self.file_path = resolve_config_path(file_path)
        self.data: Dict[str, Any] = copy.deepcopy(dict(defaults)) if defaults else {}
        self.strict = strict
        self.last_error = None

    @classmethod
    def from_env(cls, defaults: Optional[Mapping[str, Any]] = None, strict: bool = False) -> "ConfigStore":
        return cls(None, defaults=defaults, strict=strict)

    def __repr__(self) -> str:
        return f"ConfigStore({self.file_path!r}, strict={self.strict})"

    # --- file I/O -------------------------------------------------------

    def exists(self) -> bool:
        return os.path.isfile(self.file_path)

    def reload(self) -> Dict[str, Any]:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigReadError(
                f"Configuration file {self.file_path} does not exist", self.file_path
            ) from e
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise ConfigReadError(
                f"Could not read configuration file {self.file_path}: {e}", self.file_path
            ) from e

        if not isinstance(data, dict):
            raise ConfigReadError(
                f"Configuration file {self.file_path} must hold a JSON object, "
                f"found {type(data).__name__}",
                self.file_path,
            )
        self.data = data
        self.last_error = None
        return self.data

    def save(self) -> None:
        try:
            payload = json.dumps(self.data, ensure_ascii=False, indent=2, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise ConfigWriteError(
                f"Configuration for {self.file_path} is not JSON serializable: {e}", self.file_path
            ) from e

        tmp = None
        try:
            parent = os.path.dirname(self.file_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            # unique temp name per write, so concurrent writers never share one
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=parent or ".", delete=False,
                prefix=os.path.basename(self.file_path) + ".", suffix=".tmp",
            ) as f:
                tmp = f.name
                f.write(payload)
            os.replace(tmp, self.file_path)
        except OSError as e:
            if tmp and os.path.exists(tmp):
                os.remove(tmp)
            raise ConfigWriteError(
                f"Could not write configuration file {self.file_path}: {e}", self.file_path
            ) from e
        self.last_error = None

    @best_effort(fallback=False)
    def _refresh(self) -> bool:
        if not self.exists():
            # nothing written yet: keep what we have in memory
            logger.debug("No configuration file at %s, using in-memory data", self.file_path)
            return False
        self.reload()
        return True

    @best_effort(fallback=False)
    def _persist(self) -> bool:
        self.save()
        return True

    # --- public operations ---------------------------------------------

    def ensure_exists(self) -> bool:
        """Create the backing file from the in-memory data if it is missing.

        Returns True if the file was already there, False if it was just created.
        An existing file is never overwritten.
        """
        if not self.exists():
            logger.info("Could not find a configuration file at %s. Creating one!", self.file_path)
            self._persist()
            self._refresh()
            return False
        self._refresh()
        return True

    def get(self, key: str) -> str:
        # Non-string values read as "" just like missing keys; use
        # require_string() or lookup() to tell them apart.
        self._refresh()
        value = self.data.get(key)
        return value if isinstance(value, str) else ""

    def set(self, key: str, value: ConfigValue) -> bool:
        check_key(key)
        self._refresh()
        previous = self.data.get(key, _MISSING)
        self.data[key] = value
        ok = False
        try:
            ok = self._persist()
        finally:
            if not ok:
                # keep memory in line with what is on disk
                if previous is _MISSING:
                    self.data.pop(key, None)
                else:
                    self.data[key] = previous
        return ok

    def get_as_array(self, key: str) -> Optional[List[Any]]:
        self._refresh()
        value = self.data.get(key)
        if isinstance(value, tuple):
            return list(value)
        return value if isinstance(value, list) else None

    def get_as_map(self, key: str) -> Optional[Dict[str, Any]]:
        self._refresh()
        value = self.data.get(key)
        return value if isinstance(value, dict) else None

    def get_as_number(self, key: str) -> Optional[Union[int, float]]:
        self._refresh()
        value = self.data.get(key)
        if isinstance(value, bool):
            return None
        return value if isinstance(value, (int, float)) else None

    def get_as_bool(self, key: str) -> Optional[bool]:
        self._refresh()
        value = self.data.get(key)
        return value if isinstance(value, bool) else None

    def get_raw(self, key: str, default: Any = None) -> Any:
        self._refresh()
        return self.data.get(key, default)

    def lookup(self, key: str) -> Tuple[ValueKind, Any]:
        self._refresh()
        if key not in self.data:
            return ValueKind.MISSING, None
        value = self.data[key]
        return kind_of(value), value

    def require_string(self, key: str) -> str:
        kind, value = self.lookup(key)
        if kind is ValueKind.MISSING:
            raise KeyMissingError(key, self.file_path)
        if kind is not ValueKind.STRING:
            raise TypeMismatchError(key, ValueKind.STRING, kind, self.file_path)
        return value

    def delete(self, key: str) -> bool:
        self._refresh()
        if key not in self.data:
            return False
        previous = self.data.pop(key)
        ok = False
        try:
            ok = self._persist()
        finally:
            if not ok:
                self.data[key] = previous
        return ok

    def keys(self) -> List[str]:
        self._refresh()
        return list(self.data.keys())

    def as_dict(self) -> Dict[str, Any]:
        self._refresh()
        return copy.deepcopy(self.data)

    def __contains__(self, key: object) -> bool:
        self._refresh()
        return key in self.data

