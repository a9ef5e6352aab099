"""Resolution to font DPI mapping stored in a YAML file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional, Tuple, Union

import yaml

from autodpi.logging import Logger
from .errors import ConfigCreateError, ConfigFormatError

logger = Logger(__name__)

DEFAULT_DPI_YAML = """\
# 96 font DPI is default on XFCE
# -1 means "no custom font DPI"

# do not add any spaces at left or right of
# the resolution

resolutions:
  - res: 800x600
    dpi: -1
  - res: 1024x768
    dpi: -1
  - res: 1152x864
    dpi: -1
  - res: 1280x720
    dpi: -1
  - res: 1280x800
    dpi: -1
  - res: 1280x1024
    dpi: -1
  - res: 1366x664
    dpi: -1
  - res: 1360x768
    dpi: -1
  - res: 1366x768
    dpi: -1
  - res: 1600x900
    dpi: -1
  - res: 1600x1200
    dpi: -1
  - res: 1680x1050
    dpi: -1
  - res: 1920x1080
    dpi: -1
  - res: 1920x1200
    dpi: -1
  - res: 2048x1536
    dpi: -1
  - res: 3200x1800
    dpi: 148
  - res: 3840x1620
    dpi: 160
  - res: 3840x2160
    dpi: 160
"""


@dataclass(frozen=True)
class ResolutionEntry:
    resolution: str
    dpi: int


@dataclass(frozen=True)
class ResolutionMapping:
    entries: Tuple[ResolutionEntry, ...] = ()

    def lookup(self, resolution: str) -> Optional[int]:
        """DPI of the first entry matching ``resolution`` exactly, else None."""
        for entry in self.entries:
            if entry.resolution == resolution:
                return entry.dpi
        return None

    def __iter__(self) -> Iterator[ResolutionEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def parse_mapping(data: Any, path: Union[str, Path]) -> ResolutionMapping:
    if not isinstance(data, dict) or "resolutions" not in data:
        raise ConfigFormatError(path, "missing 'resolutions'")

    items = data["resolutions"]
    if not isinstance(items, list):
        raise ConfigFormatError(path, "'resolutions' is not a list")

    entries = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ConfigFormatError(path, f"entry {index} is not a mapping")

        if "res" not in item:
            raise ConfigFormatError(path, f"entry {index} has no 'res'")
        res = item["res"]
        if not isinstance(res, str):
            raise ConfigFormatError(path, f"entry {index} 'res' is not a string")
        if not res.strip():
            raise ConfigFormatError(path, f"entry {index} has an empty 'res'")

        if "dpi" not in item:
            raise ConfigFormatError(path, f"entry {index} has no 'dpi'")
        dpi = item["dpi"]
        # bool is an int subclass, yes/no must not pass as a DPI
        if isinstance(dpi, bool) or not isinstance(dpi, int):
            raise ConfigFormatError(path, f"entry {index} 'dpi' is not an integer")

        entries.append(ResolutionEntry(resolution=res, dpi=dpi))

    return ResolutionMapping(tuple(entries))


class DpiConfigStore:
    def __init__(self, path: Union[str, Path]):
        self.logger = logger
        self.path = Path(path).absolute()

    def ensure_exists(self) -> bool:
        if self.path.exists():
            return False

        self.logger.info(f"{self.path} does not exists, creating default.")
        try:
            self.path.write_text(DEFAULT_DPI_YAML, encoding="utf-8")
        except OSError as e:
            raise ConfigCreateError(self.path, e.strerror or str(e)) from e
        self.logger.info(f"{self.path} created.")
        return True

    def load(self) -> ResolutionMapping:
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFormatError(self.path, f"cannot read file: {e.strerror or e}") from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigFormatError(self.path, f"invalid YAML: {e}") from e

        mapping = parse_mapping(data, self.path)
        self.logger.info(f"Loaded {len(mapping)} resolution(s) from {self.path}")
        return mapping
