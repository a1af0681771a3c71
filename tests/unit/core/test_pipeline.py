"""Unit tests for core/pipeline.py"""

import pytest

from slugreg.core.models import Registry
from slugreg.core.pipeline import read_documents, run_generate, run_migrate, run_validate
from slugreg.core.utils.slug import generate_slug
from slugreg.crud.store import MemoryRegistryStore


def _write_post(root, name, author=None, categories=()):
    lines = ["---", "title: post"]
    if author is not None:
        lines.append(f'author: "{author}"')
    if categories:
        lines.append("categories:")
        lines.extend(f'  - "{c}"' for c in categories)
    lines += ["---", "", "Body", ""]
    (root / name).write_text("\n".join(lines), encoding="utf-8")


@pytest.fixture(name="content")
def content_fixture(tmp_path):
    root = tmp_path / "content"
    root.mkdir()
    _write_post(root, "one.md", "করিম", ["খবর"])
    _write_post(root, "two.md", "করিম", ["খবর", "মতামত"])
    _write_post(root, "three.mdx", "Zara 2")
    return root


def test_read_documents_missing_dir(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to read content"):
        read_documents(tmp_path / "missing")


def test_read_documents_invalid_utf8(tmp_path):
    (tmp_path / "bad.md").write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(RuntimeError):
        read_documents(tmp_path)


def test_run_generate_from_empty_store(content):
    store = MemoryRegistryStore()
    summary = run_generate(content, store)
    assert store.saves == 1
    assert summary.authors.total == 2
    assert summary.authors.existing == 0
    assert summary.authors.new == 2
    assert summary.categories.added == {"খবর": generate_slug("খবর"), "মতামত": generate_slug("মতামত")}
    assert store.registry == summary.registry


def test_run_generate_keeps_existing_and_reports_counts(content):
    store = MemoryRegistryStore(Registry(authors={"করিম": "karim-ab12cd"}))
    summary = run_generate(content, store)
    assert store.registry.authors["করিম"] == "karim-ab12cd"
    assert summary.authors.existing == 1
    assert list(summary.authors.added) == ["Zara 2"]


def test_run_generate_twice_is_a_no_op(content):
    store = MemoryRegistryStore()
    run_generate(content, store)
    first = store.registry.model_copy(deep=True)
    summary = run_generate(content, store)
    assert store.registry == first
    assert summary.authors.new == 0
    assert summary.categories.new == 0


def test_run_validate_reports_missing(content):
    store = MemoryRegistryStore(Registry(authors={"করিম": "karim-ab12cd"}))
    report = run_validate(content, store)
    assert report.missing_authors == {"Zara 2"}
    assert report.missing_categories == {"খবর", "মতামত"}
    assert store.saves == 0


def test_run_validate_passes_after_generate(content):
    store = MemoryRegistryStore()
    run_generate(content, store)
    assert run_validate(content, store).ok


def test_run_migrate_merges_legacy_module(tmp_path):
    legacy = tmp_path / "taxonomy.ts"
    legacy.write_text(
        'export const authors: Record<string, string> = {\n'
        '\t"করিম": "karim",\n'
        '\t"রহিম": "rahim"\n'
        '};\n'
        '\n'
        'export const categories: Record<string, string> = {\n'
        '\t"খবর": "news"\n'
        '};\n',
        encoding="utf-8",
    )
    store = MemoryRegistryStore(Registry(authors={"করিম": "karim-custom"}))
    summary = run_migrate(legacy, store)
    assert store.registry.authors == {"করিম": "karim-custom", "রহিম": "rahim"}
    assert store.registry.categories == {"খবর": "news"}
    assert summary.authors.added == {"রহিম": "rahim"}
