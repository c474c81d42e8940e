from vacuum.render.duration import format_duration
from vacuum.render.launch import RenderMode, render_launch, render_launches
from vacuum.render.palette import Palette, RichPalette, Segment, palette_for

__all__ = [
    "Palette",
    "RenderMode",
    "RichPalette",
    "Segment",
    "format_duration",
    "palette_for",
    "render_launch",
    "render_launches",
]
