"""Page assembly: typed page values rendered through the Jinja2 templates"""

from functools import lru_cache
from pathlib import Path, PurePosixPath

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from mdblog.config import Settings
from mdblog.core.models import PageDocument, Post, SiteIndexEntry
from mdblog.core.tables import BodyTransform, wrap_tables
from mdblog.core.utils.slug import slugify


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / 'templates'

UNTITLED = 'Untitled Post'
NO_DATE = 'No date'
DEFAULT_READ_TIME = '5 min read'
NO_SUMMARY = 'No summary available.'
POST_PAGE_TITLE = 'Blog Post'


@lru_cache(maxsize=None)
def _env() -> Environment:
    """Shared environment. Autoescape stays off: post content and metadata are author-controlled."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_template(name: str, **context) -> str:
    return _env().get_template(name).render(**context)


def page_url(settings: Settings, slug: str) -> str:
    """Absolute URL of a post page under the site origin."""
    return "/".join(s for s in (settings.base_url, settings.pages_url_path, f"{slug}.html") if s)


def build_page(
    title: str,
    content: str,
    is_post: bool,
    frontmatter: dict[str, str],
    settings: Settings,
    ) -> PageDocument:
    """Collect SEO, social card and canonical URL values for one page, applying fallbacks."""
    description = frontmatter.get('summary') or settings.default_description
    return PageDocument(
        title=title,
        description=description,
        keywords=frontmatter.get('keywords') or settings.default_keywords,
        author=settings.author,
        url=page_url(settings, slugify(title)) if is_post else settings.base_url,
        image=frontmatter.get('image') or settings.default_image,
        og_type='article' if is_post else 'website',
        is_post=is_post,
        content=content,
        analytics_id=settings.analytics_id,
    )


def render_document(page: PageDocument, settings: Settings) -> str:
    """Serialize a PageDocument into a complete HTML document. Values are not escaped."""
    background = PurePosixPath(Path(settings.asset_dir).name) / settings.background_asset
    return render_template('base.html', page=page, background_url=str(background))


def render_page(
    title: str,
    body_html: str,
    is_post: bool,
    frontmatter: dict[str, str],
    settings: Settings,
    ) -> str:
    """Wrap rendered content in the full site shell."""
    return render_document(build_page(title, body_html, is_post, frontmatter, settings), settings)


def index_entry(post: Post) -> SiteIndexEntry:
    """Listing view of a post; absent or empty fields fall back to fixed literals."""
    fm = post.frontmatter
    return SiteIndexEntry(
        title=fm.get('title') or UNTITLED,
        date=fm.get('date') or NO_DATE,
        read_time=fm.get('readTime') or DEFAULT_READ_TIME,
        summary=fm.get('summary') or NO_SUMMARY,
        slug=post.slug,
    )


def render_post_page(post: Post, settings: Settings, body_transform: BodyTransform = wrap_tables) -> str:
    """Render a post's standalone page: heading, meta line and transformed body."""
    content = render_template('post.html', entry=index_entry(post), body=body_transform(post.body_html))
    title = post.frontmatter.get('title') or POST_PAGE_TITLE
    return render_page(title, content, True, post.frontmatter, settings)


def render_index(posts: list[Post], settings: Settings) -> str:
    """Render the home page: intro markup followed by one summary block per post, in order."""
    content = render_template(
        'index.html',
        intro=settings.intro_html,
        entries=[index_entry(p) for p in posts],
        pages_dir=settings.pages_url_path,
    )
    return render_page(settings.site_title, content, False, {}, settings)
