from datetime import timedelta


def _truncate(value: int, unit: int) -> int:
    # Integer division rounding toward zero
    whole = abs(value) // unit
    return whole if value >= 0 else -whole


def format_duration(span: timedelta) -> str:
    """Render a signed span as ``D+1 01:03`` or ``T-00:00:05``.

    The span is usually ``now - net``, so negative values count down to
    liftoff and positive values count up after it.
    """
    microseconds = (span.days * 86400 + span.seconds) * 1_000_000 + span.microseconds
    seconds = _truncate(microseconds, 1_000_000)
    minutes = _truncate(seconds, 60)
    hours = _truncate(seconds, 3600)
    days = _truncate(seconds, 86400)

    if days != 0:
        # Show sign of days since it is non-zero
        return f"D{days:+d} {abs(hours) % 24:02d}:{abs(minutes) % 60:02d}"

    # Extract sign from seconds since hours may be zero
    sign = "-" if seconds < 0 else "+"
    return f"T{sign}{abs(hours):02d}:{abs(minutes) % 60:02d}:{abs(seconds) % 60:02d}"
