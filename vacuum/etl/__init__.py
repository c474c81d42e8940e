from vacuum.etl.baseetl import BaseETL
from vacuum.etl.launchetl import LaunchETL

__all__ = ["BaseETL", "LaunchETL"]
