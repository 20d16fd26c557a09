from typing import Any, Optional


def blank_to_none(value: Any) -> Optional[Any]:
    """Forms send "" for untouched optional inputs."""
    if isinstance(value, str) and value == "":
        return None
    return value


def require_text(value: Optional[str], message: str) -> str:
    if not value:
        raise ValueError(message)
    return value
