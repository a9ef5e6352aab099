import subprocess
from typing import List
from autodpi.logging import Logger
from .config import DisplayConfig
from .errors import ApplyFailureError

logger = Logger(__name__)


class DpiApplier:
    def __init__(self, command: str = DisplayConfig.XFCONF_COMMAND):
        self.command = command

    def build_command(self, dpi: int) -> List[str]:
        return [
            self.command,
            "-c",
            DisplayConfig.XFCONF_CHANNEL,
            "-p",
            DisplayConfig.XFCONF_DPI_PROPERTY,
            "-s",
            str(dpi),
        ]

    def apply(self, dpi: int) -> None:
        cmd = self.build_command(dpi)
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False
            )
        except OSError as e:
            raise ApplyFailureError(dpi, None, str(e)) from e

        if result.returncode != 0:
            raise ApplyFailureError(dpi, result.returncode, result.stdout or "")
