def is_valid_key(key) -> bool:
    # JSON object keys are strings; "" is a legal key
    return isinstance(key, str)


def check_key(key) -> str:
    if not is_valid_key(key):
        raise ValueError(f"Config key must be a string, got {key!r}")
    return key
