"""Fatal conditions raised by the display components.

Components only raise; ``autodpi.launch.main`` is the single place that turns
one of these into a diagnostic and a nonzero exit.
"""

from pathlib import Path
from typing import Optional, Union


class AutoDpiError(Exception):
    pass


class ConfigFormatError(AutoDpiError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f"{self.path} has incorrect format ({reason}), please delete it to create default."
        )


class UnmappedResolutionError(AutoDpiError):
    def __init__(self, resolution: str, config_path: Union[str, Path]):
        self.resolution = resolution
        self.config_path = Path(config_path)
        super().__init__(
            f"Cannot find font DPI value for {resolution} resolution, "
            f"please add it in {self.config_path} file."
        )


class ApplyFailureError(AutoDpiError):
    def __init__(self, dpi: int, exit_code: Optional[int], output: str = ""):
        self.dpi = dpi
        self.exit_code = exit_code
        self.output = output
        if exit_code is None:
            message = f"Cannot set font DPI {dpi}: {output}"
        else:
            message = f"Cannot set font DPI {dpi} (exit code {exit_code}), xfconf-query:\n{output}"
        super().__init__(message)


class AutostartError(AutoDpiError):
    pass


class ConfigCreateError(AutoDpiError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot create default {self.path}: {reason}")
