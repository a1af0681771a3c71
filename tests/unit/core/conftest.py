"""Shared fixtures for core unit tests"""

import pytest

from slugreg.core.models import DocumentNames, Registry


@pytest.fixture(name="docs")
def docs_fixture():
    """Three documents: two sharing an author, overlapping categories, one bare."""
    return [
        DocumentNames(author="করিম", categories=["খবর"]),
        DocumentNames(author="করিম", categories=["খবর", "মতামত"]),
        DocumentNames(author="Zara 2"),
        DocumentNames(),
    ]


@pytest.fixture(name="existing")
def existing_fixture():
    """A registry with a hand-edited author slug."""
    return Registry(authors={"করিম": "karim-ab12cd"}, categories={})
