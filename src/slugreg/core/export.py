"""Export the registry as a TypeScript module or JSON for the rendering layer"""

import json
from pathlib import Path

from slugreg.core.builder import sort_mapping
from slugreg.core.models import Namespace, Registry


EXPORT_FORMATS = ('ts', 'json')


def _ts_entries(mapping: dict[str, str]) -> str:
    # json.dumps gives a valid, escaped TS string literal
    return ",\n".join(
        f"\t{json.dumps(k, ensure_ascii=False)}: {json.dumps(v, ensure_ascii=False)}"
        for k, v in sort_mapping(mapping).items()
    )


def export_typescript(registry: Registry) -> str:
    """Return 'export const authors/categories: Record<string, string>' module source."""
    blocks = [
        f"export const {ns.value}: Record<string, string> = {{\n{_ts_entries(registry.mapping(ns))}\n}};\n"
        for ns in Namespace
    ]
    return "\n".join(blocks)


def export_json(registry: Registry) -> str:
    """Return the registry as an indented JSON object with sorted mappings."""
    data = {ns.value: sort_mapping(registry.mapping(ns)) for ns in Namespace}
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_export(registry: Registry, out: Path, fmt: str = 'ts') -> Path:
    """Write the registry export to out in the given format. Returns out."""
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format '{fmt}'; expected one of {', '.join(EXPORT_FORMATS)}")
    content = export_typescript(registry) if fmt == 'ts' else export_json(registry)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding='utf-8')
    return out
