import subprocess

import pytest

from autodpi.display import detector as detector_module
from autodpi.display.detector import (
    DisplayDetector,
    parse_primary_resolution,
)

XRANDR_OUTPUT = """\
Screen 0: minimum 1 x 1, current 3286 x 1080, maximum 16384 x 16384
HDMI-1 connected 1920x1080+1366+0 (normal left inverted right x axis y axis) 527mm x 296mm
   1920x1080     60.00*+
Virtual1 connected primary 1366x768+0+0 (normal left inverted right x axis y axis) 0mm x 0mm
   1366x768      59.80*+
   1280x720      60.00
DP-1 disconnected (normal left inverted right x axis y axis)
"""


def test_parse_primary_resolution_strips_offset():
    assert parse_primary_resolution(XRANDR_OUTPUT) == "1366x768"


def test_parse_primary_resolution_without_primary():
    output = "HDMI-1 connected 1920x1080+0+0 (normal left inverted right x axis y axis)\n"

    assert parse_primary_resolution(output) == ""


def test_parse_primary_resolution_with_missing_field():
    assert parse_primary_resolution("Virtual1 connected primary \n") == ""


def test_parse_primary_resolution_empty_output():
    assert parse_primary_resolution("") == ""


def test_primary_resolution_runs_xrandr(monkeypatch, completed):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return completed(cmd, stdout=XRANDR_OUTPUT)

    monkeypatch.setattr(detector_module.subprocess, "run", fake_run)

    assert DisplayDetector().primary_resolution() == "1366x768"
    assert calls == [["xrandr"]]


@pytest.mark.parametrize("error", [
    FileNotFoundError(2, "No such file or directory", "xrandr"),
    subprocess.CalledProcessError(1, ["xrandr"]),
])
def test_primary_resolution_is_empty_when_xrandr_fails(monkeypatch, error):
    def fake_run(cmd, **kwargs):
        raise error

    monkeypatch.setattr(detector_module.subprocess, "run", fake_run)

    assert DisplayDetector().primary_resolution() == ""
