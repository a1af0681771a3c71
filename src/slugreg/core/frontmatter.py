"""Line-oriented frontmatter scanner for author and category names

Structure is scanned line by line; each value is read with PyYAML:

    ---
    author: "Name"            # value optionally quoted
    categories:               # block list on the following lines
      - "First"
      - 'Second'
    categories: ["A", "B"]    # inline flow list also accepted
    ---

Anything else inside the block is ignored. Malformed values yield no value
instead of raising.
"""

import re
from typing import Optional

import yaml

from slugreg.core.models import DocumentNames


FRONTMATTER_MARKER = '---'
KEY_RE = re.compile(r'^([A-Za-z_][\w-]*)\s*:(.*)$')
ITEM_RE = re.compile(r'^\s*-\s*(.*)$')


def _unquote(value: str) -> str:
    """Strip matching surrounding quotes and whitespace from a scalar value."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        value = value[1:-1]
    return value.strip()


def _scalar(value: str) -> str:
    """Read a scalar value as YAML (quotes, trailing comments); fall back to plain unquoting."""
    try:
        loaded = yaml.safe_load(value)
    except yaml.YAMLError:
        return _unquote(value)
    if loaded is None:
        return ''
    if isinstance(loaded, str):
        return loaded.strip()
    return _unquote(value)


def _flow_items(value: str) -> list[str]:
    """Read an inline '[a, "b"]' list; anything that is not a YAML list yields no items."""
    try:
        loaded = yaml.safe_load(value)
    except yaml.YAMLError:
        return []
    if not isinstance(loaded, list):
        return []
    return [str(item).strip() for item in loaded if item is not None and not isinstance(item, (list, dict))]


def split_frontmatter(text: str) -> Optional[list[str]]:
    """Return the lines between the opening and closing '---' markers, or None."""
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_MARKER:
        return None
    for i in range(1, len(lines)):
        if lines[i].strip() == FRONTMATTER_MARKER:
            return lines[1:i]
    return None


def _scan_list(lines: list[str], start: int) -> list[str]:
    """Collect '- item' lines from start until the first non-item, non-blank line."""
    items = []
    for line in lines[start:]:
        if not line.strip():
            continue
        m = ITEM_RE.match(line)
        if not m:
            break
        items.append(_scalar(m.group(1)))
    return items


def _is_block_start(value: str) -> bool:
    """True when 'categories:' carries no inline value (blank or comment only)."""
    stripped = value.strip()
    return not stripped or stripped.startswith('#')


def extract_names(text: str) -> DocumentNames:
    """Extract the author and category names declared in a document's frontmatter."""
    lines = split_frontmatter(text)
    if lines is None:
        return DocumentNames()

    author: Optional[str] = None
    categories: list[str] = []
    seen_author = seen_categories = False

    for i, line in enumerate(lines):
        m = KEY_RE.match(line)
        if not m:
            continue
        key, value = m.group(1), m.group(2)

        if key == 'author' and not seen_author:
            seen_author = True
            author = _scalar(value) or None
        elif key == 'categories' and not seen_categories:
            seen_categories = True
            categories = _scan_list(lines, i + 1) if _is_block_start(value) else _flow_items(value)

    # Deduplicated, insertion order
    return DocumentNames(author=author, categories=list(dict.fromkeys(c for c in categories if c)))
