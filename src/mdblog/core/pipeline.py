"""Build orchestration: discover -> parse -> render -> write, then index, assets and sitemap"""

import logging
from datetime import date
from pathlib import Path

from mdblog.config import Settings
from mdblog.core.assets import copy_assets, copy_background
from mdblog.core.frontmatter import parse_frontmatter
from mdblog.core.models import BuildResult, Post, SourceDocument
from mdblog.core.render import render_markdown
from mdblog.core.sitemap import render_sitemap
from mdblog.core.tables import BodyTransform, wrap_tables
from mdblog.core.templates import render_index, render_post_page
from mdblog.core.utils.slug import slugify


logger = logging.getLogger(__name__)


def _sort_key(path: Path) -> float:
    """Build order key: source modification time (callers sort newest first)."""
    return path.stat().st_mtime


def _write(path: Path, text: str) -> Path:
    try:
        path.write_text(text, encoding='utf-8')
    except OSError as e:
        raise RuntimeError(f"Failed to write {path}: {e}") from e
    return path


def ensure_dirs(settings: Settings) -> None:
    """Create the content and page output directories if missing."""
    for d in (settings.source_path, settings.output_path):
        d.mkdir(parents=True, exist_ok=True)


def discover_files(source_dir: Path, extension: str = '.md') -> list[Path]:
    """Return content files directly under source_dir, newest modification time first."""
    files = sorted(p for p in source_dir.iterdir() if p.is_file() and p.name.endswith(extension))
    return sorted(files, key=_sort_key, reverse=True)


def read_document(path: Path) -> SourceDocument:
    return SourceDocument(path=path, raw=path.read_text(encoding='utf-8-sig'), mtime=path.stat().st_mtime)


def parse_post(doc: SourceDocument, parser_config: str = 'gfm-like', extension: str = '.md') -> Post:
    """Parse frontmatter, render the markdown body and derive the slug."""
    frontmatter, body = parse_frontmatter(doc.raw)
    name = doc.path.name
    stem = name[:-len(extension)] if extension and name.endswith(extension) else doc.path.stem
    return Post(
        frontmatter=frontmatter,
        body_html=render_markdown(body, parser_config),
        slug=slugify(frontmatter.get('title') or stem),
        source=name,
    )


def load_posts(settings: Settings) -> list[Post]:
    """Discover and parse every post in build order. Any failure aborts with file context."""
    try:
        files = discover_files(settings.source_path, settings.content_extension)
    except OSError as e:
        raise RuntimeError(f"Failed to list {settings.source_path}: {e}") from e

    posts = []
    for p in files:
        try:
            posts.append(parse_post(read_document(p), settings.parser_config, settings.content_extension))
        except Exception as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
    return posts


def find_collisions(posts: list[Post]) -> dict[str, list[str]]:
    """Map each slug shared by more than one post to its source filenames, in build order."""
    by_slug: dict[str, list[str]] = {}
    for p in posts:
        by_slug.setdefault(p.slug, []).append(p.source)
    return {slug: sources for slug, sources in by_slug.items() if len(sources) > 1}


def run_build(
    settings: Settings,
    body_transform: BodyTransform = wrap_tables,
    today: date = None,
    ) -> BuildResult:
    """Run one complete build. The first filesystem or render error aborts the run.

    Files written before the failure are left in place.
    """
    ensure_dirs(settings)
    posts = load_posts(settings)

    for slug, sources in find_collisions(posts).items():
        logger.warning("Slug '%s' shared by %s; %s wins", slug, ", ".join(sources), sources[-1])

    pages = []
    for post in posts:
        out = settings.output_path / f"{post.slug}.html"
        try:
            html = render_post_page(post, settings, body_transform)
        except Exception as e:
            raise RuntimeError(f"Failed to render {post.source}: {e}") from e
        pages.append(_write(out, html))
        logger.debug("Generated %s from %s", out, post.source)

    asset_dest = settings.output_path / Path(settings.asset_dir).name
    try:
        assets = copy_assets(settings.asset_path, asset_dest)
        copy_background(settings.asset_path, settings.background_asset, settings.root_path)
    except OSError as e:
        raise RuntimeError(f"Failed to copy assets from {settings.asset_path}: {e}") from e

    index = _write(settings.root_path / 'index.html', render_index(posts, settings))
    sitemap = _write(settings.root_path / 'sitemap.xml', render_sitemap(posts, settings, today))

    return BuildResult(posts=posts, pages=pages, assets=assets, index=index, sitemap=sitemap)
