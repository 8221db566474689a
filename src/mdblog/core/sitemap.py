"""XML sitemap generation"""

from datetime import date

from mdblog.config import Settings
from mdblog.core.models import Post, SitemapEntry
from mdblog.core.templates import page_url, render_template


ROOT_PRIORITY, ROOT_CHANGEFREQ = '1.0', 'weekly'
POST_PRIORITY, POST_CHANGEFREQ = '0.8', 'monthly'


def sitemap_entries(posts: list[Post], settings: Settings, today: date = None) -> list[SitemapEntry]:
    """Root entry first, then one entry per post in build order.

    lastmod is always the build date, never a content date.
    """
    lastmod = (today or date.today()).isoformat()
    entries = [SitemapEntry(
        url=f"{settings.base_url}/", lastmod=lastmod,
        changefreq=ROOT_CHANGEFREQ, priority=ROOT_PRIORITY,
    )]
    entries.extend(
        SitemapEntry(
            url=page_url(settings, p.slug), lastmod=lastmod,
            changefreq=POST_CHANGEFREQ, priority=POST_PRIORITY,
        )
        for p in posts
    )
    return entries


def render_sitemap(posts: list[Post], settings: Settings, today: date = None) -> str:
    return render_template('sitemap.xml', entries=sitemap_entries(posts, settings, today))
