"""Registry validation and the Markdown remediation report"""

from typing import Iterable, Union

from slugreg.core.builder import collation_key
from slugreg.core.models import ContentDoc, DocumentNames, Registry, ValidationReport
from slugreg.core.utils.slug import generate_slug


def validate_registry(
    documents: Iterable[Union[ContentDoc, DocumentNames]],
    registry: Registry,
    ) -> ValidationReport:
    """Return every referenced author/category name that has no registry entry."""
    report = ValidationReport()
    for doc in documents:
        names = doc.names if isinstance(doc, ContentDoc) else doc
        if names.author and names.author not in registry.authors:
            report.missing_authors.add(names.author)
        for category in names.categories:
            if category and category not in registry.categories:
                report.missing_categories.add(category)
    return report


def _checklist(names: set[str]) -> str:
    if not names:
        return "_None_"
    return "\n".join(
        f'- [ ] `"{name}": "{generate_slug(name)}"`'
        for name in sorted(names, key=collation_key)
    )


def render_report(report: ValidationReport, registry_path: str = "taxonomy.yaml") -> str:
    """Render a Markdown checklist of missing entries with suggested slugs."""
    return (
        "# Missing Taxonomy Entries\n"
        "\n"
        "## Missing Authors\n"
        f"{_checklist(report.missing_authors)}\n"
        "\n"
        "## Missing Categories\n"
        f"{_checklist(report.missing_categories)}\n"
        "\n"
        f"Please add these entries to `{registry_path}` "
        "(or run `slugreg generate`) and review the slugs.\n"
    )


def issue_title(report: ValidationReport) -> str:
    return (
        f"Missing Taxonomy Entries: {len(report.missing_authors)} authors, "
        f"{len(report.missing_categories)} categories"
    )
