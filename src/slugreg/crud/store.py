"""Registry persistence: store interface, YAML file store, in-memory store, legacy import"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from slugreg.core.builder import sort_mapping
from slugreg.core.models import Namespace, Registry


logger = structlog.get_logger()

LEGACY_HEADER_RE = re.compile(r'^\s*export\s+const\s+(authors|categories)\b')
LEGACY_ENTRY_RE = re.compile(r'^\s*"((?:[^"\\]|\\.)*)"\s*:\s*"((?:[^"\\]|\\.)*)"\s*,?\s*$')


class RegistryStore(ABC):
    @abstractmethod
    def load(self) -> Registry:
        """Return the persisted registry; missing or unreadable data yields an empty one."""
        raise NotImplementedError

    @abstractmethod
    def save(self, registry: Registry) -> None:
        """Overwrite the persisted registry with a sorted serialization."""
        raise NotImplementedError


def _coerce_mapping(data: Any, namespace: str) -> Optional[dict[str, str]]:
    """Return data[namespace] as {str: str}, {} if absent, or None if malformed."""
    value = data.get(namespace)
    if value is None:
        return {}
    if not isinstance(value, dict):
        return None
    return {str(k): str(v) for k, v in value.items() if v is not None}


def dump_registry(registry: Registry) -> str:
    """Serialize registry as a YAML document with sorted authors/categories mappings."""
    data = {ns.value: sort_mapping(registry.mapping(ns)) for ns in Namespace}
    return yaml.safe_dump(data, allow_unicode=True, sort_keys=False, default_flow_style=False)


def parse_registry(text: str) -> Registry:
    """Parse a YAML registry document. Raises ValueError on invalid YAML or shape."""
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML registry: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid registry: expected a mapping, got {type(data).__name__}")

    mappings = {}
    for ns in Namespace:
        mapping = _coerce_mapping(data, ns.value)
        if mapping is None:
            raise ValueError(f"Invalid registry: '{ns.value}' must be a mapping")
        mappings[ns.value] = mapping
    return Registry(**mappings)


@dataclass
class YamlRegistryStore(RegistryStore):
    path: Path

    def __post_init__(self):
        self.path = Path(self.path)

    def load(self) -> Registry:
        if not self.path.exists():
            logger.info("registry_missing", path=str(self.path))
            return Registry()
        try:
            return parse_registry(self.path.read_text(encoding='utf-8'))
        except ValueError as e:
            logger.info("registry_unreadable", path=str(self.path), error=str(e))
            return Registry()

    def save(self, registry: Registry) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump_registry(registry), encoding='utf-8')
        logger.debug(
            "registry_saved", path=str(self.path),
            authors=len(registry.authors), categories=len(registry.categories),
        )


@dataclass
class MemoryRegistryStore(RegistryStore):
    registry: Registry = field(default_factory=Registry)
    saves: int = 0

    def load(self) -> Registry:
        return self.registry.model_copy(deep=True)

    def save(self, registry: Registry) -> None:
        self.registry = Registry(
            authors=sort_mapping(registry.authors),
            categories=sort_mapping(registry.categories),
        )
        self.saves += 1


def _unescape(value: str) -> str:
    return re.sub(r'\\(.)', r'\1', value)


def load_legacy_module(text: str) -> Registry:
    """Read a generated 'export const authors = {...}' TypeScript module.

    Only '"Name": "slug"' lines inside an authors/categories object literal are
    read; everything else is skipped.
    """
    mappings: dict[str, dict[str, str]] = {ns.value: {} for ns in Namespace}
    current: Optional[str] = None

    for line in text.splitlines():
        header = LEGACY_HEADER_RE.match(line)
        if header:
            current = header.group(1)
            continue
        if current is None:
            continue
        if line.strip().startswith('}'):
            current = None
            continue
        entry = LEGACY_ENTRY_RE.match(line)
        if entry:
            mappings[current][_unescape(entry.group(1))] = _unescape(entry.group(2))

    return Registry(**mappings)
