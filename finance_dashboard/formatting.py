"""Render JSON values the way the browser client shows them."""
import math
from typing import Any


def is_truthy(value: Any) -> bool:
    """Truthiness of a JSON value as seen by the client: containers always count."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def to_display(value: Any) -> str:
    """String form of a JSON value; integral numbers show without a decimal part."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, list):
        return ",".join("" if item is None else to_display(item) for item in value)
    return "[object Object]"
