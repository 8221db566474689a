"""Intermediate data models for the build pipeline"""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel


@dataclass
class SourceDocument:
    """A content file as read from disk; not persisted."""
    path:  Path
    raw:   str
    mtime: float


@dataclass
class Post:
    """One parsed and rendered content unit backing a single output page."""
    frontmatter: dict[str, str]
    body_html:   str            # rendered markdown, before any body transform
    slug:        str
    source:      str            # source filename, e.g. "hello.md"


class SiteIndexEntry(BaseModel):
    """Home page listing view of a Post with fallbacks already applied."""
    title:     str
    date:      str
    read_time: str
    summary:   str
    slug:      str


class SitemapEntry(BaseModel):
    url:         str
    lastmod:     str            # build date, YYYY-MM-DD
    changefreq:  str
    priority:    str


class PageDocument(BaseModel):
    """Every value interpolated into the page shell, rendered by one serializer."""
    title:        str
    description:  str
    keywords:     str
    author:       str
    url:          str
    image:        str
    og_type:      str
    is_post:      bool
    content:      str
    analytics_id: str | None = None


@dataclass
class BuildResult:
    """Summary of one build invocation."""
    posts:   list[Post]
    pages:   list[Path]
    assets:  list[Path]
    index:   Path
    sitemap: Path
