from datetime import datetime
from typing import Any, Callable

import httpx

from vacuum.config import Settings
from vacuum.etl.baseetl import BaseETL
from vacuum.errors import DeserializeError
from vacuum.logging_config import get_logger
from vacuum.models import Launch, LaunchCollection, Mission, Rocket
from vacuum.render import Palette, RenderMode, render_launches
from vacuum.utils.utils import parse_iso_date, require

logger = get_logger(__name__)


def transform_rocket(raw: Any, path: str) -> Rocket:
    return Rocket(
        id=require(raw, "id", int, path),
        name=require(raw, "name", str, path),
        configuration=require(raw, "configuration", str, path),
    )


def transform_mission(raw: Any, path: str) -> Mission:
    return Mission(
        id=require(raw, "id", int, path),
        name=require(raw, "name", str, path),
        description=require(raw, "description", str, path),
        type_name=require(raw, "typeName", str, path),
    )


def transform_launch(raw: Any, path: str) -> Launch:
    # Launch Library sends the same instants twice; only the iso* forms are parsed
    dates = {
        key: parse_iso_date(require(raw, key, str, path), f"{path}.{key}")
        for key in ("isostart", "isoend", "isonet")
    }

    vid_urls = require(raw, "vidURLs", list, path)
    for i, url in enumerate(vid_urls):
        if not isinstance(url, str):
            raise DeserializeError(f"{path}.vidURLs[{i}]", f"expected str, got {url!r}")

    missions = require(raw, "missions", list, path)

    return Launch(
        # Identifiers
        id=require(raw, "id", int, path),
        name=require(raw, "name", str, path),
        # Timing
        net=require(raw, "net", str, path),
        window_start=dates["isostart"],
        window_end=dates["isoend"],
        net_at=dates["isonet"],
        tbd_date=require(raw, "tbddate", int, path),
        tbd_time=require(raw, "tbdtime", int, path),
        # Coverage
        vid_urls=tuple(vid_urls),
        # Hardware / payload
        rocket=transform_rocket(require(raw, "rocket", dict, path), f"{path}.rocket"),
        missions=tuple(
            transform_mission(mission, f"{path}.missions[{i}]")
            for i, mission in enumerate(missions)
        ),
    )


class LaunchETL(BaseETL[LaunchCollection]):
    name = "Launch"

    def __init__(
        self,
        mode: RenderMode = RenderMode.COMPACT,
        palette: Palette | None = None,
        sink: Callable[[str], Any] = print,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(settings, transport)
        self.mode = mode
        self.palette = palette or Palette()
        self.sink = sink

    def url(self, number: int) -> str:
        return self.settings.launch_url(number)

    def transform(self, raw_data: dict[str, Any]) -> LaunchCollection:
        raw_launches = require(raw_data, "launches", list, "")

        collection = LaunchCollection(
            offset=require(raw_data, "offset", int, ""),
            count=require(raw_data, "count", int, ""),
            total=require(raw_data, "total", int, ""),
            launches=tuple(
                transform_launch(raw, f"launches[{i}]")
                for i, raw in enumerate(raw_launches)
            ),
        )

        logger.debug(
            "transformed",
            etl=self.name,
            launches=len(collection),
            offset=collection.offset,
            total=collection.total,
        )
        return collection

    def render(
        self, launches: LaunchCollection, now: datetime | None = None
    ) -> list[str]:
        return render_launches(launches, self.mode, now=now, palette=self.palette)

    def load(self, launches: LaunchCollection) -> None:
        for block in self.render(launches):
            self.sink(block)
