import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'sonoma'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from sonoma.core.stdlib_logging import reset_stdlib_logging_for_tests  # noqa: E402

_SONOMA_ENV_KEYS = (
    "SONOMA_API_KEY",
    "SONOMA_NETWORK",
    "SONOMA_DEBUG",
    "SONOMA_HOME",
    "SONOMA_ASSUME_YES",
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Give every test its own HOME, a clean SONOMA_* environment and a cwd under HOME.

    The project config walk stops at HOME, so files above the test tree are
    never discovered.
    """
    home = (tmp_path / "home").resolve()
    work = home / "work"
    work.mkdir(parents=True)

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for key in _SONOMA_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(work)

    yield home

    reset_stdlib_logging_for_tests()


@pytest.fixture
def work_dir(isolated_home: Path) -> Path:
    return isolated_home / "work"


@pytest.fixture
def persisted_file(isolated_home: Path) -> Path:
    """Location of the default persisted config file (not created)."""
    return isolated_home / ".sonoma" / "config.json"


@pytest.fixture
def write_persisted(persisted_file: Path):
    def _write(data: Any) -> Path:
        persisted_file.parent.mkdir(parents=True, exist_ok=True)
        persisted_file.write_text(json.dumps(data), encoding="utf-8")
        return persisted_file

    return _write
