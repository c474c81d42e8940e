from datetime import datetime, timezone, tzinfo
from email.utils import format_datetime
from enum import Enum
from typing import Iterable

from vacuum.models import Launch
from vacuum.render.duration import format_duration
from vacuum.render.palette import Palette, Segment


class RenderMode(str, Enum):
    COMPACT = "compact"
    EXTENDED = "extended"


def render_launch(
    launch: Launch,
    mode: RenderMode = RenderMode.COMPACT,
    *,
    now: datetime | None = None,
    palette: Palette | None = None,
    tz: tzinfo | None = None,
) -> str:
    """Render one launch as a block of newline-terminated lines.

    Extended mode appends rocket and mission details to the compact block
    without changing any compact line. ``now`` and ``tz`` default to the
    current UTC time and the system local zone.
    """
    now = now or datetime.now(timezone.utc)
    palette = palette or Palette()
    lines = []

    # Header
    lines.append(f"{palette.paint('Launch', Segment.HEADER)} {launch.name}")

    # Liftoff
    liftoff = format_datetime(launch.net_at.astimezone(tz))
    if launch.is_instantaneous:
        window = " instantaneous"
    else:
        window = f" {launch.window_minutes}m window"
    countdown = palette.paint(format_duration(now - launch.net_at), Segment.DURATION)
    line = f"{palette.paint('Liftoff:', Segment.LABEL)} {liftoff}{window} {countdown}"
    if launch.time_tbd:
        line += f" {palette.paint('TBD', Segment.TBD_BADGE)}"
    lines.append(line)

    # Broadcasts
    label = palette.paint("Broadcasts:", Segment.LABEL)
    if launch.vid_urls:
        lines.append(" ".join([label, *launch.vid_urls]))
    else:
        lines.append(f"{label} TBD / Unavailable")

    if mode == RenderMode.EXTENDED:
        lines.append(f"{palette.paint('Rocket:', Segment.LABEL)} {launch.rocket.name}")
        lines.append(palette.paint("Missions:", Segment.LABEL))
        for i, mission in enumerate(launch.missions, start=1):
            index = palette.paint(f"{i}) [{mission.type_name}]", Segment.MISSION_INDEX)
            lines.append(f"{index} {mission.description}")

    return "".join(f"{line}\n" for line in lines)


def render_launches(
    launches: Iterable[Launch],
    mode: RenderMode = RenderMode.COMPACT,
    *,
    now: datetime | None = None,
    palette: Palette | None = None,
    tz: tzinfo | None = None,
) -> list[str]:
    # One shared reference instant so every block counts against the same now
    now = now or datetime.now(timezone.utc)
    return [
        render_launch(launch, mode, now=now, palette=palette, tz=tz)
        for launch in launches
    ]
