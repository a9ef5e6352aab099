#!/usr/bin/env python3

from typing import Optional

import shutil
import argparse
from autodpi.logging import Logger

logger = Logger(__name__)

DEFAULT_BINS = ["xrandr", "xfconf-query"]

PACKAGE_MAP = {
    "xrandr": "xorg-xrandr",
    "xfconf-query": "xfconf",
}


class BinaryChecker:
    def __init__(self, bins: Optional[list] = None):
        self.bins_to_check = bins or DEFAULT_BINS

    def check_exists(self, binary: str) -> bool:
        return shutil.which(binary) is not None

    def missing(self) -> list:
        return [b for b in self.bins_to_check if not self.check_exists(b)]

    def check_all(self) -> bool:
        missing = self.missing()

        if missing:
            logger.warning("missing required binaries: %s", " ".join(missing))
            pkgs = list(dict.fromkeys(PACKAGE_MAP.get(b, b) for b in missing))
            logger.warning("Suggested install (Arch): sudo pacman -S --needed %s", " ".join(pkgs))
            return False

        logger.debug("required binaries present")
        return True


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Check for the commands autodpi runs and print suggested package names if missing")
    parser.add_argument("bins", nargs="*", help="binaries to check")
    parsed = parser.parse_args(argv)

    checker = BinaryChecker(parsed.bins if parsed.bins else None)
    return 0 if checker.check_all() else 3


if __name__ == "__main__":
    raise SystemExit(main())
