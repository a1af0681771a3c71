"""Data models for extracted names, the slug registry, and pipeline results"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class Namespace(str, Enum):
    """The two independent name -> slug mapping domains."""
    authors = "authors"
    categories = "categories"


class DocumentNames(BaseModel):
    """Names referenced by one document's frontmatter."""
    author: Optional[str] = None
    categories: list[str] = Field(default_factory=list)


class Registry(BaseModel):
    """Persisted name -> slug mappings, one per namespace."""
    authors:    dict[str, str] = Field(default_factory=dict)
    categories: dict[str, str] = Field(default_factory=dict)

    def mapping(self, namespace: Namespace) -> dict[str, str]:
        """Return the mapping for a namespace (the live dict, not a copy)."""
        return getattr(self, Namespace(namespace).value)


class ValidationReport(BaseModel):
    """Names referenced by documents but absent from the registry."""
    missing_authors:    set[str] = Field(default_factory=set)
    missing_categories: set[str] = Field(default_factory=set)

    @property
    def ok(self) -> bool:
        return not self.missing_authors and not self.missing_categories


@dataclass
class ContentDoc:
    """A discovered content file and the names its frontmatter declares."""
    path:  Path
    names: DocumentNames


@dataclass
class NamespaceSummary:
    """Counts and new entries for one namespace after a build."""
    total:      int
    existing:   int
    added:      dict[str, str] = field(default_factory=dict)     # name -> new slug
    duplicates: dict[str, list[str]] = field(default_factory=dict)  # slug -> names

    @property
    def new(self) -> int:
        return len(self.added)


@dataclass
class BuildSummary:
    """Result of a generate run: the saved registry and per-namespace counts."""
    registry:   Registry
    authors:    NamespaceSummary
    categories: NamespaceSummary
