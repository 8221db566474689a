"""Line-based frontmatter extraction"""

DELIMITER = "---"
BOM = "\ufeff"


def parse_frontmatter(text: str) -> tuple[dict[str, str], str]:
    """Return (frontmatter, body) for a content file.

    The block opens on the first non-blank line if it is ``---`` (a leading
    byte order mark is ignored) and closes on the first ``---`` seen after at
    least one key was parsed. Inside the block, ``key: value`` lines split at
    the first colon; lines without a colon are ignored and a repeated key
    keeps its last value. Malformed input never raises:

    - no opening delimiter: ({}, text) with the text untouched
    - no closing delimiter: every remaining line is metadata, body is ""
    """
    lines = text.split("\n")
    start = 0
    while start < len(lines) and not lines[start].strip(BOM).strip():
        start += 1
    if start == len(lines) or lines[start].strip(BOM).strip() != DELIMITER:
        return {}, text

    frontmatter: dict[str, str] = {}
    for i in range(start, len(lines)):
        stripped = lines[i].strip(BOM).strip()
        if stripped == DELIMITER:
            if not frontmatter:
                continue
            return frontmatter, "\n".join(lines[i + 1:])
        if ":" in stripped:
            key, value = stripped.split(":", 1)
            frontmatter[key.strip()] = value.strip()
    return frontmatter, ""
