"""Root test configuration: isolated site roots and config environment"""

import os

import pytest

from mdblog.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any MDBLOG_* variables from the outer environment."""
    for name in list(os.environ):
        if name.startswith("MDBLOG_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(name="site_root")
def site_root_fixture(tmp_path):
    root = tmp_path / "site"
    (root / "posts").mkdir(parents=True)
    return root


@pytest.fixture(name="settings")
def settings_fixture(site_root):
    return Settings(site_root=str(site_root))


@pytest.fixture(name="write_post")
def write_post_fixture(site_root):
    """Write a post file under posts/ with an explicit modification time."""
    def _write(name: str, text: str, mtime: float = 1_700_000_000.0):
        path = site_root / "posts" / name
        path.write_text(text, encoding="utf-8")
        os.utime(path, (mtime, mtime))
        return path
    return _write
