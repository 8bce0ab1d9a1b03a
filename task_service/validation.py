import re
from typing import Optional

from .exceptions import InvalidArgument

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def normalize_title(title: Optional[str]) -> str:
    """Trim a title for a new task, rejecting one that ends up empty."""
    title = (title or "").strip()
    if not title:
        raise InvalidArgument("title is required")
    return title


def parse_task_id(raw: str) -> int:
    """Parse a path segment as a signed 64-bit decimal id."""
    if not _ID_PATTERN.fullmatch(raw):
        raise InvalidArgument("invalid id")
    digits = raw.lstrip("+-").lstrip("0") or "0"
    # Longer digit strings cannot fit in 64 bits.
    if len(digits) > 19:
        raise InvalidArgument("invalid id")
    value = -int(digits) if raw.startswith("-") else int(digits)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidArgument("invalid id")
    return value


def parse_bool(raw: str) -> bool:
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise InvalidArgument("completed query param must be boolean")


def parse_completed_filter(raw: Optional[str]) -> Optional[bool]:
    """Parse the ``completed`` query parameter; missing or empty means no filter."""
    if not raw:
        return None
    return parse_bool(raw)
