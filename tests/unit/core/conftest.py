"""Shared fixtures for core unit tests"""

import pytest

from mdblog.core.models import Post


TABLE_HTML = """\
<table>
<thead>
<tr>
<th>a</th>
</tr>
</thead>
</table>
"""


@pytest.fixture(name="post")
def post_fixture():
    return Post(
        frontmatter={
            "title": "Hello World!",
            "date": "March 3, 2025",
            "readTime": "7 min read",
            "summary": "A first post.",
        },
        body_html="<h1>Hi</h1>\n" + TABLE_HTML,
        slug="hello-world",
        source="hello.md",
    )


@pytest.fixture(name="bare_post")
def bare_post_fixture():
    """A post whose file carried no frontmatter at all."""
    return Post(frontmatter={}, body_html="<p>Just text.</p>\n", slug="plain", source="plain.md")
