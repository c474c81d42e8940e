from vacuum.errors import DateFormatError, DeserializeError, PayloadError, VacuumError
from vacuum.models import Launch, LaunchCollection, Mission, Rocket
from vacuum.render import RenderMode, format_duration, render_launch
from vacuum.utils.utils import parse_iso_date

__version__ = "0.1.0"

__all__ = [
    "DateFormatError",
    "DeserializeError",
    "Launch",
    "LaunchCollection",
    "Mission",
    "PayloadError",
    "RenderMode",
    "Rocket",
    "VacuumError",
    "format_duration",
    "parse_iso_date",
    "render_launch",
]
