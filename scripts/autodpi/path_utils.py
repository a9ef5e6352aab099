#!/usr/bin/env python3

import os
import sys
from pathlib import Path
from typing import List, Optional, Union

from autodpi.display.config import DisplayConfig

APP_PROG = "autodpi"


class PathResolver:
    @staticmethod
    def get_dpi_file(path: Optional[Union[str, Path]] = None) -> Path:
        return Path(path or DisplayConfig.DPI_FILE_NAME).absolute()

    @staticmethod
    def get_config_home() -> Path:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            return Path(xdg)
        return Path.home() / ".config"

    @staticmethod
    def get_autostart_dir() -> Path:
        return PathResolver.get_config_home() / "autostart"

    @staticmethod
    def get_prog_name(argv0: Optional[str] = None) -> str:
        name = Path(argv0 if argv0 is not None else sys.argv[0]).name
        if not name or name in ("__main__.py", "-c"):
            return APP_PROG
        return name

    @staticmethod
    def get_log_file(argv0: Optional[str] = None) -> Path:
        return Path(f"{PathResolver.get_prog_name(argv0)}.txt")

    @staticmethod
    def get_exec_command(argv0: Optional[str] = None) -> List[str]:
        argv0 = argv0 if argv0 is not None else sys.argv[0]
        if PathResolver.get_prog_name(argv0) == APP_PROG and Path(argv0).name != APP_PROG:
            return [sys.executable, "-m", APP_PROG, "--run"]
        return [str(Path(argv0).resolve()), "--run"]
