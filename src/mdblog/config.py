"""Application configuration: settings schema and mdblog.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "mdblog.yaml"

DEFAULT_INTRO = """\
<h1>Hello, I'm Snehal! 👋</h1>
<div class="bio">
    Welcome to my corner of the internet
    <br><br>
    By day, I'm a software engineer who gets paid to write low level systems code that <b>actually works</b> (doesn't generate CVEs hopefully).
    <br><br>
    But by early mornings and late-nights, I'm simply a hobbyist trying to give my CPU and GPU cores a personality crisis with utterly meaningless projects. This is where I share those early morning and late-night experiments—the projects where I do everything and nothing at the same time.
</div>

<h2>Latest Projects & Thoughts</h2>"""


class Settings(BaseModel):
    app_name:          str = "mdblog"
    site_root:         str = Field(default=".",        description="Directory receiving index.html, sitemap.xml and the background asset")
    source_dir:        str = Field(default="posts",    description="Markdown content directory (relative to site_root)")
    output_dir:        str = Field(default="pages",    description="Rendered post pages directory (relative to site_root)")
    asset_dir:         str = Field(default="images",   description="Static asset directory copied under output_dir")
    background_asset:  str = Field(default="back.png", description="Asset copied to site_root for the home page background")
    content_extension: str = Field(default=".md", pattern=r"^\.[A-Za-z0-9]+$", description="Content file suffix")
    site_url:          str = Field(default="https://p-not-doom.com", description="Site origin, no trailing slash")
    site_title:        str = "Snehal Reddy - Systems Programming & Performance Optimization"
    author:            str = "Snehal Reddy"
    default_description: str = (
        "Technical blog post by Snehal Reddy on systems programming, C/C++, Rust, "
        "and performance optimization."
    )
    default_keywords:  str = (
        "systems programming, C++, Rust, performance optimization, low-level programming, "
        "game server, memory management"
    )
    default_image:     str = "https://p-not-doom.com/images/snake-battle-royale.png"
    analytics_id:      Optional[str] = Field(default=None, description="Google Analytics measurement id; omitted when unset")
    parser_config:     str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    intro_html:        str = Field(default=DEFAULT_INTRO, description="Markup placed above the post list on the home page")

    @property
    def root_path(self) -> Path:
        return Path(self.site_root)

    @property
    def source_path(self) -> Path:
        return self.root_path / self.source_dir

    @property
    def output_path(self) -> Path:
        return self.root_path / self.output_dir

    @property
    def asset_path(self) -> Path:
        return self.root_path / self.asset_dir

    @property
    def pages_url_path(self) -> str:
        """URL segment for post pages: output_dir relative to site_root, never a local absolute path."""
        out = Path(self.output_dir)
        if out.is_absolute():
            root = self.root_path.resolve()
            out = out.relative_to(root) if out.is_relative_to(root) else Path(out.name)
        parts = [p for p in out.parts if p not in ("", ".", "..")]
        return "/".join(parts)

    @property
    def base_url(self) -> str:
        return self.site_url.rstrip("/")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdblog.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
