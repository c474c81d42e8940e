class VacuumError(Exception):
    """Base class for all errors raised by vacuum"""


class PayloadError(VacuumError):
    """The response payload could not be turned into entities"""


class DateFormatError(PayloadError, ValueError):
    def __init__(self, value: object, field: str | None = None) -> None:
        self.value = value
        self.field = field
        location = f" in {field}" if field else ""
        super().__init__(
            f"Invalid date{location}: {value!r} does not match YYYYMMDDTHHMMSSZ"
        )


class DeserializeError(PayloadError):
    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Cannot deserialize {field}: {reason}")
