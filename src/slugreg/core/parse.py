"""Content discovery and per-document name extraction"""

from pathlib import Path
from typing import Iterable

from slugreg.core.frontmatter import extract_names
from slugreg.core.models import ContentDoc


MD_EXTENSIONS = ('.md', '.mdx')


def discover_files(path: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[Path]:
    """Return sorted content files under path, or [path] if a single matching file.

    Raises FileNotFoundError if path does not exist.
    """
    suffixes = {e.lower() for e in extensions}
    if not path.exists():
        raise FileNotFoundError(f"Content path not found: {path}")
    if path.is_file():
        return [path] if path.suffix.lower() in suffixes else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in suffixes)


def parse_file(path: Path) -> ContentDoc:
    """Read a content file and extract its author and category names."""
    return ContentDoc(path=path, names=extract_names(path.read_text(encoding='utf-8')))


def parse_dir(path: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[ContentDoc]:
    """Parse every content file under path (file or directory)."""
    return [parse_file(p) for p in discover_files(path, extensions)]
