from enum import Enum

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style


class Segment(str, Enum):
    """Labeled parts of a rendered launch that may be highlighted."""

    TITLE = "title"
    HEADER = "header"
    LABEL = "label"
    DURATION = "duration"
    TBD_BADGE = "tbd_badge"
    MISSION_INDEX = "mission_index"


DEFAULT_STYLES: dict[Segment, str] = {
    Segment.TITLE: "green",
    Segment.HEADER: "yellow",
    Segment.LABEL: "cyan",
    Segment.DURATION: "green",
    Segment.TBD_BADGE: "black on yellow",
    Segment.MISSION_INDEX: "yellow",
}


class Palette:
    """Plain palette: segments pass through untouched."""

    def paint(self, text: str, segment: Segment) -> str:
        return text


class RichPalette(Palette):
    """Wraps segments in ANSI escapes using rich styles."""

    def __init__(
        self,
        color_system: ColorSystem = ColorSystem.STANDARD,
        styles: dict[Segment, str] | None = None,
    ) -> None:
        self.color_system = color_system
        self.styles = {
            segment: Style.parse(style)
            for segment, style in {**DEFAULT_STYLES, **(styles or {})}.items()
        }

    def paint(self, text: str, segment: Segment) -> str:
        return self.styles[segment].render(text, color_system=self.color_system)


def palette_for(console: Console) -> Palette:
    # Disable colour if output is not to a colour-capable terminal
    if not console.is_terminal or console.no_color:
        return Palette()

    color_system = console.color_system
    if color_system is None:
        return Palette()
    return RichPalette(COLOR_SYSTEMS[color_system])
