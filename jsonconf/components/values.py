# components/values.py
from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Union

# Anything json.load can hand back for a single value
ConfigValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]


class ValueKind(Enum):
    MISSING = "missing"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded JSON value.

    bool is checked before numbers: in Python True is an int.
    Tuples count as sequences since json.dump writes them as arrays.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise TypeError(f"Unsupported config value type: {type(value).__name__}")
