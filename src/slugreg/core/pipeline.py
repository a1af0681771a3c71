"""Pipeline step functions: generate, validate, and migrate orchestration"""

from pathlib import Path
from typing import Iterable

import structlog

from slugreg.core.builder import build_registry, find_duplicate_slugs, sort_mapping
from slugreg.core.models import (
    BuildSummary, ContentDoc, Namespace, NamespaceSummary, Registry, ValidationReport,
)
from slugreg.core.parse import MD_EXTENSIONS, parse_dir
from slugreg.core.validator import validate_registry
from slugreg.crud.store import RegistryStore, load_legacy_module


logger = structlog.get_logger()


def read_documents(path: Path, extensions: Iterable[str] = MD_EXTENSIONS) -> list[ContentDoc]:
    """Parse all content under path. Raises RuntimeError if the content cannot be read."""
    try:
        docs = parse_dir(path, extensions)
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read content from {path}: {e}") from e
    logger.debug("documents_read", path=str(path), count=len(docs))
    return docs


def _summarize(before: Registry, after: Registry) -> BuildSummary:
    """Compare registries namespace by namespace."""
    summaries = {}
    for ns in Namespace:
        old, new = before.mapping(ns), after.mapping(ns)
        summaries[ns.value] = NamespaceSummary(
            total=len(new),
            existing=len(old),
            added={name: slug for name, slug in new.items() if name not in old},
            duplicates=find_duplicate_slugs(new),
        )
    return BuildSummary(registry=after, **summaries)


def run_generate(
    path: Path,
    store: RegistryStore,
    extensions: Iterable[str] = MD_EXTENSIONS,
    ) -> BuildSummary:
    """Extend the stored registry with slugs for every new name under path and save it."""
    docs = read_documents(path, extensions)
    existing = store.load()
    registry = build_registry(docs, existing)
    store.save(registry)
    summary = _summarize(existing, registry)
    logger.info(
        "registry_generated",
        authors_new=summary.authors.new, categories_new=summary.categories.new,
    )
    return summary


def run_validate(
    path: Path,
    store: RegistryStore,
    extensions: Iterable[str] = MD_EXTENSIONS,
    ) -> ValidationReport:
    """Check every name referenced under path against the stored registry (read-only)."""
    docs = read_documents(path, extensions)
    report = validate_registry(docs, store.load())
    logger.info(
        "registry_validated",
        missing_authors=len(report.missing_authors),
        missing_categories=len(report.missing_categories),
    )
    return report


def run_migrate(legacy_file: Path, store: RegistryStore) -> BuildSummary:
    """Merge a legacy TypeScript registry module into the store.

    Entries already in the store win; legacy slugs are copied verbatim otherwise.
    """
    legacy = load_legacy_module(legacy_file.read_text(encoding='utf-8'))
    existing = store.load()
    merged = Registry(**{
        ns.value: sort_mapping({**legacy.mapping(ns), **existing.mapping(ns)})
        for ns in Namespace
    })
    store.save(merged)
    return _summarize(existing, merged)
