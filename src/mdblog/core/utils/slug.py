"""Slug generation for post page names"""

import re


def slugify(text: str) -> str:
    """Convert a title to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^a-z0-9 -]', '', text)
    text = re.sub(r'\s+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
