"""Unit tests for config.py"""

from pathlib import Path

import pytest

from mdblog.config import DEFAULT_INTRO, Settings, load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray mdblog.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Settings defaults are used when no mdblog.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.source_dir == "posts"
    assert settings.output_dir == "pages"
    assert settings.asset_dir == "images"
    assert settings.site_url == "https://p-not-doom.com"
    assert settings.parser_config == "gfm-like"
    assert settings.analytics_id is None


def test_load_config_uses_env_site_url(monkeypatch):
    monkeypatch.setenv("MDBLOG_SITE_URL", "https://env.example")
    assert load_config().site_url == "https://env.example"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDBLOG_OUTPUT_DIR takes precedence over mdblog.yaml output_dir."""
    (tmp_path / "mdblog.yaml").write_text("output_dir: from-file\nsource_dir: content\n")
    monkeypatch.setenv("MDBLOG_OUTPUT_DIR", "from-env")
    settings = load_config()
    assert settings.output_dir == "from-env"
    assert settings.source_dir == "content"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDBLOG_SOURCE_DIR", "env-posts")
    settings = load_config(overrides={"source_dir": "cli-posts", "output_dir": None})
    assert settings.source_dir == "cli-posts"
    assert settings.output_dir == "pages"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when mdblog.yaml contains invalid YAML."""
    (tmp_path / "mdblog.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid mdblog.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "mdblog.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_invalid_extension():
    with pytest.raises(ValueError, match="Invalid settings"):
        load_config(overrides={"content_extension": "md"})


def test_settings_paths_resolve_against_site_root():
    settings = Settings(site_root="site", source_dir="src", output_dir="out", asset_dir="img")
    assert settings.source_path == Path("site/src")
    assert settings.output_path == Path("site/out")
    assert settings.asset_path == Path("site/img")


def test_base_url_strips_trailing_slash():
    assert Settings(site_url="https://a.example/").base_url == "https://a.example"


def test_default_intro_text():
    assert Settings().intro_html == DEFAULT_INTRO
    assert "experiments—the projects where I do everything and nothing" in DEFAULT_INTRO


@pytest.mark.parametrize("output_dir,expected", [
    ("pages", "pages"),
    ("./html/posts", "html/posts"),
    ("../pages", "pages"),
])
def test_pages_url_path_relative(output_dir, expected):
    assert Settings(output_dir=output_dir).pages_url_path == expected


def test_pages_url_path_absolute(tmp_path):
    """Absolute output dirs map to a public path, never the local filesystem path."""
    inside = Settings(site_root=str(tmp_path), output_dir=str(tmp_path.resolve() / "public" / "pages"))
    outside = Settings(site_root=str(tmp_path / "site"), output_dir=str(tmp_path / "other" / "html"))
    assert inside.pages_url_path == "public/pages"
    assert outside.pages_url_path == "html"
