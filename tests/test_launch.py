import pytest

from autodpi import launch
from autodpi.display.errors import ApplyFailureError


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "autodpi.txt"


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setattr(launch.sys, "platform", "linux")


@pytest.mark.parametrize("argv", [
    [],
    ["--help"],
    ["--bogus"],
    ["--run", "--install"],
    ["--inst"],
    ["--r"],
    ["--s"],
])
def test_usage_exits_with_one(argv, tmp_path, log_file, capsys):
    assert launch.main(argv, log_file=log_file) == 1
    assert not (tmp_path / "config" / "autostart" / "autodpi.desktop").exists()
    assert not (tmp_path / "dpi.yaml").exists()

    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "--install" in out
    assert "--status" in out


def test_refuses_non_linux(monkeypatch, log_file, caplog):
    monkeypatch.setattr(launch.sys, "platform", "darwin")

    assert launch.main(["--run"], log_file=log_file) == 1
    assert "only on Linux" in caplog.text


def test_banner_is_duplicated_to_log_file(log_file):
    launch.main(["--help"], log_file=log_file)
    launch.main(["--help"], log_file=log_file)

    content = log_file.read_text()
    assert content.count("AUTODPI v0.1") == 2
    assert "\x1b[" not in content


def test_install_status_uninstall(tmp_path, log_file, caplog):
    desktop = tmp_path / "config" / "autostart" / "autodpi.desktop"

    assert launch.main(["--status"], log_file=log_file) == 1
    assert "App autorun is not installed." in caplog.text

    assert launch.main(["--install"], log_file=log_file) == 0
    assert desktop.exists()
    assert launch.main(["--install"], log_file=log_file) == 1
    assert "App already installed." in caplog.text

    caplog.clear()
    assert launch.main(["--status"], log_file=log_file) == 1
    assert "App autorun is installed." in caplog.text

    assert launch.main(["--uninstall"], log_file=log_file) == 0
    assert not desktop.exists()
    assert launch.main(["--uninstall"], log_file=log_file) == 1


class FakeWatcher:
    error = None

    def __init__(self, mapping, detector, applier, config_path):
        self.mapping = mapping
        self.config_path = config_path

    def run(self):
        raise self.error


def test_run_bootstraps_config_and_reports_fatal_error(tmp_path, monkeypatch, log_file, caplog):
    FakeWatcher.error = ApplyFailureError(-1, 1, "xfconf-query: no channel")
    monkeypatch.setattr(launch, "ResolutionWatcher", FakeWatcher)

    assert launch.main(["--run"], log_file=log_file) == 1

    assert (tmp_path / "dpi.yaml").exists()
    assert "xfconf-query: no channel" in caplog.text
    assert "xfconf-query: no channel" in log_file.read_text()


def test_run_with_malformed_config(tmp_path, monkeypatch, log_file, caplog):
    config = tmp_path / "custom.yaml"
    config.write_text("resolutions:\n  - res: 1920x1080\n")
    monkeypatch.setattr(launch, "ResolutionWatcher", FakeWatcher)

    assert launch.main(["--run", "--config", str(config)], log_file=log_file) == 1

    assert "please delete it to create default" in caplog.text
    assert not (tmp_path / "dpi.yaml").exists()


def test_run_interrupted(monkeypatch, log_file):
    FakeWatcher.error = KeyboardInterrupt()
    monkeypatch.setattr(launch, "ResolutionWatcher", FakeWatcher)

    assert launch.main(["--run"], log_file=log_file) == 130


def test_run_with_unwritable_config_location(tmp_path, monkeypatch, log_file, caplog):
    monkeypatch.setattr(launch, "ResolutionWatcher", FakeWatcher)
    config = tmp_path / "missing-dir" / "dpi.yaml"

    assert launch.main(["--run", "--config", str(config)], log_file=log_file) == 1

    assert f"Cannot create default {config}" in caplog.text
    assert not config.exists()
