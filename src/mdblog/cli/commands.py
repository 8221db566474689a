"""CLI command implementations"""

import logging
from datetime import date
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.pipeline import find_collisions, load_posts, run_build
from mdblog.core.templates import NO_DATE
from mdblog.core.utils.slug import slugify


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def build_cmd(
    root: Annotated[Optional[str], typer.Option("--site-root", help="Directory receiving index.html and sitemap.xml")] = None,
    source: Annotated[Optional[str], typer.Option("--source-dir", help="Markdown content directory")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Post page output directory")] = None,
    site_url: Annotated[Optional[str], typer.Option("--site-url", help="Site origin used for canonical and sitemap URLs")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")] = False,
    ):
    """Build post pages, the home page and sitemap.xml from the content directory."""
    _setup_logging(verbose)
    settings = _settings(overrides={
        "site_root": root, "source_dir": source, "output_dir": out,
        "site_url": site_url, "parser_config": parser,
    })
    try:
        result = run_build(settings)
    except Exception as e:
        _fail("Build failed", e)

    for post, page in zip(result.posts, result.pages):
        typer.echo(f"  {post.source} -> {page}")
    typer.echo(f"Built {len(result.posts)} post(s) in {settings.output_path}/")
    typer.echo(f"Generated {result.index} with {len(result.posts)} post summaries")
    typer.echo(f"Copied {len(result.assets)} asset(s)")
    typer.echo(f"Generated {result.sitemap}")


def list_cmd():
    """List posts in build order (newest modification first) with their slugs."""
    settings = _settings()
    if not settings.source_path.is_dir():
        _fail(f"Content directory not found: {settings.source_path}")
    try:
        posts = load_posts(settings)
    except RuntimeError as e:
        _fail(str(e))
    if not posts:
        typer.echo(f"No posts found in {settings.source_path}.")
        raise typer.Exit(1)

    collisions = find_collisions(posts)
    for p in posts:
        marker = " (slug collision)" if p.slug in collisions else ""
        typer.echo(f"{p.slug}\t{p.frontmatter.get('date') or NO_DATE}\t{p.source}{marker}")


def new_cmd(
    title: Annotated[str, typer.Argument(help="Post title")],
    post_date: Annotated[Optional[str], typer.Option("--date", help="Display date (default: today)")] = None,
    read_time: Annotated[Optional[str], typer.Option("--read-time", help="Read time label, e.g. '7 min read'")] = None,
    summary: Annotated[Optional[str], typer.Option("--summary", help="One-line summary for the home page")] = None,
    ):
    """Create a new post file with a frontmatter block."""
    settings = _settings()
    slug = slugify(title)
    if not slug:
        _fail(f"Title '{title}' produces an empty slug")

    fields = {"title": title, "date": post_date or date.today().isoformat(),
              "readTime": read_time, "summary": summary}
    header = "\n".join(f"{k}: {v}" for k, v in fields.items() if v)
    path = settings.source_path / f"{slug}{settings.content_extension}"
    if path.exists():
        _fail(f"{path} already exists")
    try:
        settings.source_path.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\n{header}\n---\n\n# {title}\n", encoding="utf-8")
    except OSError as e:
        _fail(f"Could not create {path}", e)
    typer.echo(f"Created {path}")
