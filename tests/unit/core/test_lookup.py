"""Unit tests for core/lookup.py"""

import pytest

from slugreg.core.lookup import SlugLookup
from slugreg.core.models import Registry
from slugreg.crud.store import MemoryRegistryStore


@pytest.fixture(name="lookup")
def lookup_fixture():
    return SlugLookup(Registry(
        authors={"করিম": "karim-ab12cd"},
        categories={"খবর": "news"},
    ))


def test_forward_lookup(lookup):
    assert lookup.slug_for_author("করিম") == "karim-ab12cd"
    assert lookup.slug_for_category("খবর") == "news"


def test_forward_lookup_falls_back_to_input(lookup):
    assert lookup.slug_for_author("অজানা") == "অজানা"
    assert lookup.slug_for_category("অজানা") == "অজানা"


def test_reverse_lookup(lookup):
    assert lookup.author_for_slug("karim-ab12cd") == "করিম"
    assert lookup.category_for_slug("news") == "খবর"


def test_reverse_lookup_absent(lookup):
    assert lookup.author_for_slug("news") is None
    assert lookup.category_for_slug("missing") is None


def test_from_store():
    store = MemoryRegistryStore(Registry(authors={"a": "a-2p"}))
    assert SlugLookup.from_store(store).author_for_slug("a-2p") == "a"
