#!/usr/bin/env python3

from typing import Optional

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from autodpi import APP_NAME, __version__
from autodpi.autostart import AutostartEntry
from autodpi.check_required_bins import BinaryChecker
from autodpi.display import (
    AutoDpiError,
    DisplayDetector,
    DpiApplier,
    DpiConfigStore,
    ResolutionWatcher,
)
from autodpi.display.config import DisplayConfig
from autodpi.logging import Logger, detach_log, duplicate_log
from autodpi.path_utils import PathResolver

logger = Logger(__name__)

TAGLINE = "Automatic font DPI changer for the XFCE."

THEME = Theme(
    {
        "title": "bold",
        "option": "cyan",
        "detail": "dim white",
    }
)


class UsageError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def full_app_name() -> str:
    return f"{APP_NAME} v{__version__}"


ACTION_OPTIONS = (
    ("install", "autorun with the system"),
    ("uninstall", "do not autorun with the system"),
    ("run", "just run"),
    ("status", "check if app (autorun) is installed"),
)

EXTRA_OPTIONS = (
    ("--config PATH", f"font DPI file (default {DisplayConfig.DPI_FILE_NAME})"),
    ("--help", "show this text"),
)


def parse_args(argv: Optional[list] = None):
    # Options must be spelled out, --inst is not --install
    parser = ArgumentParser(prog="autodpi", add_help=False, allow_abbrev=False)
    actions = parser.add_mutually_exclusive_group()
    for name, help_text in ACTION_OPTIONS:
        actions.add_argument(f"--{name}", dest="action", action="store_const", const=name, help=help_text)
    parser.add_argument("--config", metavar="PATH", help=EXTRA_OPTIONS[0][1])
    parser.add_argument("--help", action="store_true", help=EXTRA_OPTIONS[1][1])
    return parser.parse_args(argv)


def print_usage(console: Optional[Console] = None) -> None:
    console = console or Console(theme=THEME, highlight=False, soft_wrap=True)

    console.print("This app will automatically change font DPI for your")
    console.print("current screen resolution, for the Xfce Desktop Environment.")
    console.print()
    console.print(f"Font DPI will be read from [option]{DisplayConfig.DPI_FILE_NAME}[/option] file.")
    console.print()
    console.print("It requires [option]xrandr[/option] and [option]xfconf-query[/option] commands.")
    console.print()
    console.print("This app can be run only on Linux.")
    console.print()
    console.print(f"[title]Usage:[/title] {PathResolver.get_prog_name()} <option>")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("option", style="option")
    table.add_column("description", style="detail")
    for name, help_text in ACTION_OPTIONS:
        table.add_row(f"--{name}", help_text)
    for option, help_text in EXTRA_OPTIONS:
        table.add_row(option, help_text)
    console.print(table)


def get_autostart_entry() -> AutostartEntry:
    name = full_app_name()
    return AutostartEntry(name=name, exec_command=PathResolver.get_exec_command(), comment=TAGLINE)


def print_status() -> int:
    entry = get_autostart_entry()
    if entry.is_enabled():
        logger.info("App autorun is installed.")
    else:
        logger.info("App autorun is not installed.")
    return 1


def install_autorun() -> int:
    get_autostart_entry().enable()
    logger.info("App installed.")
    return 0


def uninstall_autorun() -> int:
    get_autostart_entry().disable()
    logger.info("App uninstalled.")
    return 0


def run(config_path: Optional[str] = None) -> int:
    BinaryChecker().check_all()

    store = DpiConfigStore(PathResolver.get_dpi_file(config_path))
    store.ensure_exists()
    mapping = store.load()

    watcher = ResolutionWatcher(mapping, DisplayDetector(), DpiApplier(), store.path)
    watcher.run()
    return 0


def main(argv: Optional[list] = None, log_file: Optional[Path] = None) -> int:
    handler = duplicate_log(log_file or PathResolver.get_log_file())
    try:
        return _main(argv)
    finally:
        detach_log(handler)


def _main(argv: Optional[list]) -> int:
    logger.info(full_app_name())
    logger.info(TAGLINE)

    if not sys.platform.startswith("linux"):
        logger.error("This app can be used only on Linux.")
        return 1

    try:
        args = parse_args(argv)
    except UsageError as e:
        logger.warning(str(e))
        print_usage()
        return 1

    if args.help or args.action is None:
        print_usage()
        return 1

    try:
        if args.action == "status":
            return print_status()
        if args.action == "install":
            return install_autorun()
        if args.action == "uninstall":
            return uninstall_autorun()
        return run(args.config)
    except AutoDpiError as e:
        logger.critical(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
