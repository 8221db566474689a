"""Markdown-to-HTML rendering via markdown-it"""

from functools import lru_cache

from markdown_it import MarkdownIt


@lru_cache(maxsize=None)
def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name, with tables enabled."""
    return MarkdownIt(preset, options_update={"linkify": False}).enable("table")


def render_markdown(body: str, preset: str = 'gfm-like') -> str:
    """Render a markdown body to HTML markup."""
    return _make_parser(preset).render(body)
