"""Responsive table wrapping for rendered post bodies"""

from typing import Callable


BodyTransform = Callable[[str], str]

TABLE_OPEN = '<table>'
TABLE_CLOSE = '</table>'
WRAPPER_OPEN = '<div class="table-wrapper">'
WRAPPER_CLOSE = '</div>'


def wrap_tables(html: str) -> str:
    """Wrap every literal <table> ... </table> pair in a horizontal scroll container.

    Plain substring replacement: tags with attributes, nesting and unbalanced
    tags are not inspected.
    """
    return (
        html
        .replace(TABLE_OPEN, WRAPPER_OPEN + TABLE_OPEN)
        .replace(TABLE_CLOSE, TABLE_CLOSE + WRAPPER_CLOSE)
    )
