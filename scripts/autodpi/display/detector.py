"""Primary display resolution detection using xrandr."""

import subprocess
from typing import Optional, Sequence
from autodpi.logging import Logger
from .config import DisplayConfig

logger = Logger(__name__)


def strip_offset(token: str) -> str:
    # 1366x768+0+0 -> 1366x768
    return token.split('+')[0]


def parse_primary_resolution(xrandr_output: str) -> str:
    for line in xrandr_output.split('\n'):
        line = line.strip()

        # parse line like:
        # Virtual1 connected primary 1366x768+0+0 (normal left inverted right x axis y axis) 0mm x 0mm
        if DisplayConfig.PRIMARY_MARKER in line:
            fields = line.split(' ')
            if len(fields) <= DisplayConfig.RESOLUTION_FIELD:
                return ""
            return strip_offset(fields[DisplayConfig.RESOLUTION_FIELD])

    return ""


class DisplayDetector:

    def __init__(self, command: Optional[Sequence[str]] = None):
        self.logger = logger
        self.command = list(command or DisplayConfig.XRANDR_COMMAND)

    def get_xrandr_output(self) -> str:
        try:
            result = subprocess.run(self.command, capture_output=True, text=True, check=True)
            return result.stdout
        except (subprocess.CalledProcessError, OSError) as e:
            self.logger.warning(f"Failed to run {self.command[0]}: {e}")
            return ""

    def primary_resolution(self) -> str:
        """Current resolution of the primary display, or "" when none is reported."""
        output = self.get_xrandr_output()
        if not output:
            return ""

        resolution = parse_primary_resolution(output)
        if not resolution:
            self.logger.debug("No primary display reported")
        return resolution
