# components/errors.py
from __future__ import annotations
from typing import Optional

from jsonconf.components.values import ValueKind


class ConfigStoreError(Exception):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigReadError(ConfigStoreError):
    """Backing file missing, unreadable, not JSON, or not a JSON object."""


class ConfigWriteError(ConfigStoreError):
    """Value could not be serialized or the file could not be written."""


class KeyMissingError(ConfigStoreError, KeyError):
    def __init__(self, key: str, path: Optional[str] = None):
        super().__init__(f"Key {key!r} is not set in {path}", path)
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class TypeMismatchError(ConfigStoreError, TypeError):
    def __init__(self, key: str, expected: ValueKind, actual: ValueKind, path: Optional[str] = None):
        super().__init__(
            f"Key {key!r} holds a {actual.value}, expected {expected.value}", path
        )
        self.key = key
        self.expected = expected
        self.actual = actual
