import os

BASE_URL = "https://launchlibrary.net/1.4"

CREDITS = """Credits:
https://launchlibrary.net/ - spaceflight database
https://github.com/Belar/space-cli - original node.js implementation"""


class Settings:
    """Runtime settings read from the environment."""

    def __init__(self) -> None:
        self.base_url = os.getenv("VACUUM_BASE_URL", BASE_URL).rstrip("/")
        self.timeout = float(os.getenv("VACUUM_TIMEOUT", "30"))
        self.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        self.log_format = os.getenv("LOG_FORMAT", "console")  # json or console

    def launch_url(self, number: int) -> str:
        return f"{self.base_url}/launch/next/{number}"
