import re
from datetime import datetime, timezone
from typing import Any

from vacuum.errors import DateFormatError, DeserializeError

# Launch Library 1.4 "iso" dates, e.g. 20200101T120000Z
ISO_DATE_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})(?P<month>[0-9]{2})(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2})(?P<minute>[0-9]{2})(?P<second>[0-9]{2})Z"
)


def parse_iso_date(s: str, field: str | None = None) -> datetime:
    if not isinstance(s, str):
        raise DateFormatError(s, field)

    match = ISO_DATE_PATTERN.fullmatch(s)
    if match is None:
        raise DateFormatError(s, field)

    try:
        return datetime(
            *(int(group) for group in match.groups()), tzinfo=timezone.utc
        )
    except ValueError:
        # Pattern matched but the calendar value is out of range
        raise DateFormatError(s, field) from None


def require(raw: Any, key: str, kind: type, path: str) -> Any:
    if not isinstance(raw, dict):
        raise DeserializeError(path or "payload", f"expected an object, got {type(raw).__name__}")

    field = f"{path}.{key}" if path else key
    if key not in raw:
        raise DeserializeError(field, "missing field")

    value = raw[key]
    # bool is an int subclass but never a valid number in the payload
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DeserializeError(field, f"expected integer, got {value!r}")
        if value < 0:
            raise DeserializeError(field, f"expected unsigned integer, got {value}")
    elif not isinstance(value, kind):
        raise DeserializeError(
            field, f"expected {kind.__name__}, got {type(value).__name__}"
        )
    return value
