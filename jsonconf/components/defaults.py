# components/defaults.py
from __future__ import annotations
from typing import Any, Dict

# Seed for newly created config files, shared by the whole process.
# Starts empty; callers fill it in before creating stores if they want to.
DEFAULT_DATA: Dict[str, Any] = {}


def get_default_data() -> Dict[str, Any]:
    # Hands out the shared dict itself, not a copy
    return DEFAULT_DATA
