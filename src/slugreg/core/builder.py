"""Registry builder: merge newly discovered names into an existing registry"""

import unicodedata
from collections import defaultdict
from typing import Iterable, Union

import structlog

from slugreg.core.models import ContentDoc, DocumentNames, Namespace, Registry
from slugreg.core.utils.slug import generate_slug


logger = structlog.get_logger()


def _names_of(doc: Union[ContentDoc, DocumentNames]) -> DocumentNames:
    return doc.names if isinstance(doc, ContentDoc) else doc


def collation_key(name: str) -> tuple[str, str]:
    """Locale-independent sort key: accent/case-folded form, raw name as tiebreak."""
    return unicodedata.normalize('NFKD', name).casefold(), name


def sort_mapping(mapping: dict[str, str]) -> dict[str, str]:
    """Return a copy of mapping with keys in collation order."""
    return {k: mapping[k] for k in sorted(mapping, key=collation_key)}


def collect_names(
    documents: Iterable[Union[ContentDoc, DocumentNames]],
    ) -> dict[Namespace, set[str]]:
    """Return the distinct author and category names referenced by documents."""
    found: dict[Namespace, set[str]] = {Namespace.authors: set(), Namespace.categories: set()}
    for doc in documents:
        names = _names_of(doc)
        if names.author:
            found[Namespace.authors].add(names.author)
        found[Namespace.categories].update(c for c in names.categories if c)
    return found


def merge_names(existing: dict[str, str], names: Iterable[str]) -> dict[str, str]:
    """Add a generated slug for each name not already a key; existing slugs are kept."""
    merged = dict(existing)
    for name in names:
        if name not in merged:
            merged[name] = generate_slug(name)
    return sort_mapping(merged)


def find_duplicate_slugs(mapping: dict[str, str]) -> dict[str, list[str]]:
    """Return {slug: names} for every slug assigned to more than one name."""
    by_slug: dict[str, list[str]] = defaultdict(list)
    for name, slug in mapping.items():
        by_slug[slug].append(name)
    return {slug: names for slug, names in by_slug.items() if len(names) > 1}


def build_registry(
    documents: Iterable[Union[ContentDoc, DocumentNames]],
    existing: Registry,
    ) -> Registry:
    """Extend existing with slugs for every unseen name found in documents.

    Never changes or removes an existing entry, so re-running with the same
    inputs is a no-op.
    """
    found = collect_names(documents)
    registry = Registry(
        authors=merge_names(existing.authors, found[Namespace.authors]),
        categories=merge_names(existing.categories, found[Namespace.categories]),
    )
    for namespace in Namespace:
        for slug, names in find_duplicate_slugs(registry.mapping(namespace)).items():
            logger.warning("duplicate_slug", namespace=namespace.value, slug=slug, names=names)
    return registry
