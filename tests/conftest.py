import subprocess

import pytest


@pytest.fixture
def completed():
    def make(args, returncode=0, stdout=""):
        return subprocess.CompletedProcess(args, returncode, stdout=stdout)
    return make
