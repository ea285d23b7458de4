"""Developer tasks powered by Invoke."""

from __future__ import annotations

import pathlib
import subprocess
from typing import Iterable

from invoke import task

ROOT = pathlib.Path(__file__).parent.resolve()
RESULTS_DIR = ROOT / "results"


def _run(command: Iterable[str] | str) -> None:
    cmd = command if isinstance(command, str) else " ".join(command)
    subprocess.run(cmd, shell=True, check=True, cwd=ROOT)


@task
def tests(_context):
    """Run the unit test suite."""
    RESULTS_DIR.mkdir(exist_ok=True)
    _run(["uv", "run", "pytest", "tests/"])


@task
def coverage(_context):
    """Run tests under coverage of the robotpages package."""
    RESULTS_DIR.mkdir(exist_ok=True)
    _run(["uv", "run", "coverage", "erase"])
    _run(
        [
            "uv", "run", "coverage", "run", "--source=robotpages",
            "-m", "pytest", "tests/", "--junitxml=results/pytest.xml",
        ]
    )
    _run(["uv", "run", "coverage", "report"])
    _run(["uv", "run", "coverage", "html", "-d", "results/htmlcov"])


@task
def libdoc(_context):
    """Generate keyword documentation for PageLibrary."""
    RESULTS_DIR.mkdir(exist_ok=True)
    _run(["uv", "run", "libdoc", "robotpages.lib.PageLibrary", "results/PageLibrary.html"])


@task
def build(_context):
    """Build distribution artifacts."""
    _run(["uv", "build"])
