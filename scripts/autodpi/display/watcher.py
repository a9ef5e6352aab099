"""Resolution polling loop.

Every poll interval the primary resolution is read; a resolution different
from the last applied one is looked up in the mapping and its font DPI is
applied once. Unmapped resolutions and failed applies end the loop by raising.
"""

import time
from pathlib import Path
from typing import Callable, Optional, Union
from autodpi.logging import Logger
from .applier import DpiApplier
from .config import DisplayConfig
from .detector import DisplayDetector
from .errors import UnmappedResolutionError
from .mapping import ResolutionMapping

logger = Logger(__name__)


class ResolutionWatcher:

    def __init__(
        self,
        mapping: ResolutionMapping,
        detector: DisplayDetector,
        applier: DpiApplier,
        config_path: Union[str, Path],
        interval: float = DisplayConfig.POLL_INTERVAL,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.logger = logger
        self.mapping = mapping
        self.detector = detector
        self.applier = applier
        self.config_path = Path(config_path)
        self.interval = interval
        self._sleep = sleep
        self._last_resolution = ""

    @property
    def last_resolution(self) -> str:
        return self._last_resolution

    def tick(self) -> Optional[int]:
        """Run one poll; return the applied DPI, or None when nothing changed."""
        resolution = self.detector.primary_resolution()

        if not resolution or resolution == self._last_resolution:
            return None

        self.logger.info(f"Found new resolution {resolution}")

        dpi = self.mapping.lookup(resolution)
        if dpi is None:
            raise UnmappedResolutionError(resolution, self.config_path)

        self.logger.info(f"Setting font DPI {dpi}")
        self.applier.apply(dpi)

        self._last_resolution = resolution
        return dpi

    def run(self) -> None:
        self.logger.info(f"Watching primary display every {self.interval:g}s")
        while True:
            self._sleep(self.interval)
            self.tick()
