"""Render-time name <-> slug accessor over a loaded registry"""

from typing import Optional

from slugreg.core.models import Registry
from slugreg.crud.store import RegistryStore


def _reverse(mapping: dict[str, str], slug: str) -> Optional[str]:
    # Linear scan; registries hold tens to low hundreds of entries.
    return next((name for name, s in mapping.items() if s == slug), None)


class SlugLookup:
    """Forward lookups fall back to the input; reverse lookups return None if absent."""

    def __init__(self, registry: Registry):
        self.registry = registry

    @classmethod
    def from_store(cls, store: RegistryStore) -> "SlugLookup":
        return cls(store.load())

    def slug_for_author(self, name: str) -> str:
        return self.registry.authors.get(name) or name

    def slug_for_category(self, name: str) -> str:
        return self.registry.categories.get(name) or name

    def author_for_slug(self, slug: str) -> Optional[str]:
        return _reverse(self.registry.authors, slug)

    def category_for_slug(self, slug: str) -> Optional[str]:
        return _reverse(self.registry.categories, slug)
