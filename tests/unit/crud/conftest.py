"""Shared fixtures for crud unit tests"""

import pytest

from slugreg.core.models import Registry


@pytest.fixture(name="registry")
def registry_fixture():
    """A registry mixing generated, hand-edited, and non-Latin entries."""
    return Registry(
        authors={"করিম": "karim-ab12cd", "Zara 2": "zara-2-abc123", "রহিম": "slug-1q2w3e"},
        categories={"খবর": "news", "মতামত": "slug-9z8y7x"},
    )
