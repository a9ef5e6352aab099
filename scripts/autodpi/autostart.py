#!/usr/bin/env python3
"""XDG autostart entry so ``autodpi --run`` starts with the desktop session."""

import shlex
from pathlib import Path
from typing import List, Optional

from autodpi.logging import Logger
from autodpi.display.errors import AutostartError
from autodpi.path_utils import PathResolver

logger = Logger(__name__)

DESKTOP_ENTRY_TEMPLATE = """\
[Desktop Entry]
Type=Application
Name={name}
Comment={comment}
Exec={exec_line}
X-GNOME-Autostart-enabled=true
"""


class AutostartEntry:
    def __init__(
        self,
        name: str,
        exec_command: List[str],
        comment: str = "",
        autostart_dir: Optional[Path] = None,
        file_name: str = "autodpi.desktop"
    ):
        self.name = name
        self.exec_command = exec_command
        self.comment = comment
        self.autostart_dir = autostart_dir or PathResolver.get_autostart_dir()
        self.path = self.autostart_dir / file_name

    def render(self) -> str:
        return DESKTOP_ENTRY_TEMPLATE.format(
            name=self.name,
            comment=self.comment,
            exec_line=shlex.join(self.exec_command),
        )

    def is_enabled(self) -> bool:
        return self.path.exists()

    def enable(self) -> None:
        if self.is_enabled():
            raise AutostartError("App already installed.")

        try:
            self.autostart_dir.mkdir(parents=True, exist_ok=True)
            self.path.write_text(self.render(), encoding="utf-8")
        except OSError as e:
            raise AutostartError(f"Failed to write {self.path}: {e}") from e

        logger.debug(f"Wrote autostart entry: {self.path}")

    def disable(self) -> None:
        if not self.is_enabled():
            raise AutostartError("App is not installed.")

        try:
            self.path.unlink()
        except OSError as e:
            raise AutostartError(f"Failed to remove {self.path}: {e}") from e

        logger.debug(f"Removed autostart entry: {self.path}")
