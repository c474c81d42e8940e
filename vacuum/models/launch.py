from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from vacuum.models.mission import Mission
from vacuum.models.rocket import Rocket


@dataclass(frozen=True)
class Launch:
    # Identifiers
    id: int
    name: str

    # Timing
    net: str
    window_start: datetime
    window_end: datetime
    net_at: datetime
    tbd_date: int
    tbd_time: int

    # Coverage
    vid_urls: tuple[str, ...]

    # Hardware / payload
    rocket: Rocket
    missions: tuple[Mission, ...]

    @property
    def is_instantaneous(self) -> bool:
        return self.window_start == self.window_end

    @property
    def window_minutes(self) -> int:
        delta = self.window_end - self.window_start
        seconds = delta.days * 86400 + delta.seconds
        # Truncate toward zero, not floor
        minutes = abs(seconds) // 60
        return minutes if seconds >= 0 else -minutes

    @property
    def time_tbd(self) -> bool:
        return self.tbd_time == 1


@dataclass(frozen=True)
class LaunchCollection:
    # Pagination metadata, informational only
    offset: int
    count: int
    total: int

    launches: tuple[Launch, ...]

    def __iter__(self) -> Iterator[Launch]:
        return iter(self.launches)

    def __len__(self) -> int:
        return len(self.launches)
