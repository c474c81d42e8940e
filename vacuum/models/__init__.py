from vacuum.models.launch import Launch, LaunchCollection
from vacuum.models.mission import Mission
from vacuum.models.rocket import Rocket

__all__ = ["Launch", "LaunchCollection", "Mission", "Rocket"]
