"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from slugreg.config import Settings, load_config
from slugreg.core.export import write_export
from slugreg.core.lookup import SlugLookup
from slugreg.core.models import BuildSummary, Namespace, NamespaceSummary
from slugreg.core.pipeline import run_generate, run_migrate, run_validate
from slugreg.core.validator import issue_title, render_report
from slugreg.crud.store import YamlRegistryStore
from slugreg.notify.github import GitHubIssueNotifier


RegistryOpt = Annotated[Optional[str], typer.Option("--registry", help="Registry YAML file")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def settings_or_fail(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_namespace(label: str, summary: NamespaceSummary) -> None:
    typer.echo(f"Found {summary.total} {label} ({summary.existing} existing, {summary.new} new)")
    for name, slug in summary.added.items():
        typer.echo(f"  + {name}: {slug}")
    for slug, names in summary.duplicates.items():
        typer.echo(f"  ! slug '{slug}' shared by: {', '.join(names)}", err=True)


def _echo_summary(summary: BuildSummary, registry_path: str) -> None:
    _echo_namespace("authors", summary.authors)
    _echo_namespace("categories", summary.categories)
    typer.echo(f"Updated: {registry_path}")


def generate_cmd(
    content: Annotated[Optional[str], typer.Argument(help="Content file or directory")] = None,
    registry: RegistryOpt = None,
    ):
    """Add slugs for new author/category names and rewrite the registry."""
    settings = settings_or_fail(overrides={"content_dir": content, "registry_path": registry})
    store = YamlRegistryStore(Path(settings.registry_path))
    try:
        summary = run_generate(Path(settings.content_dir), store, settings.extensions)
    except RuntimeError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Could not write registry", e)

    _echo_summary(summary, settings.registry_path)
    typer.echo("Please review the generated slugs and edit them if needed.")


def validate_cmd(
    content: Annotated[Optional[str], typer.Argument(help="Content file or directory")] = None,
    registry: RegistryOpt = None,
    issue: Annotated[bool, typer.Option("--issue/--no-issue", help="File a GitHub issue on failure when credentials are set")] = True,
    ):
    """Check that every author/category name has a registry entry; exit 1 otherwise."""
    settings = settings_or_fail(overrides={"content_dir": content, "registry_path": registry})
    store = YamlRegistryStore(Path(settings.registry_path))
    try:
        report = run_validate(Path(settings.content_dir), store, settings.extensions)
    except RuntimeError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Could not read registry", e)

    if report.ok:
        typer.echo("All authors and categories are in the registry.")
        return

    body = render_report(report, settings.registry_path)
    typer.echo("Missing registry entries found!", err=True)
    typer.echo(body, err=True)

    if issue:
        notifier = GitHubIssueNotifier.from_env(
            labels=settings.issue_labels,
            api_url=settings.github_api_url,
            timeout=settings.http_timeout,
        )
        if notifier is not None:
            url = notifier.create_issue(issue_title(report), body)
            if url:
                typer.echo(f"Created issue: {url}", err=True)
            else:
                typer.echo("Could not create issue (see log).", err=True)
    raise typer.Exit(1)


def lookup_cmd(
    value: Annotated[str, typer.Argument(help="Name (or slug with --reverse) to look up")],
    kind: Annotated[Namespace, typer.Option("--kind", help="Namespace to search")] = Namespace.authors,
    reverse: Annotated[bool, typer.Option("--reverse", help="Map a slug back to its name")] = False,
    registry: RegistryOpt = None,
    ):
    """Translate a name to its slug, or a slug back to its name."""
    settings = settings_or_fail(overrides={"registry_path": registry})
    try:
        lookup = SlugLookup.from_store(YamlRegistryStore(Path(settings.registry_path)))
    except OSError as e:
        _fail("Could not read registry", e)

    if not reverse:
        forward = lookup.slug_for_author if kind == Namespace.authors else lookup.slug_for_category
        typer.echo(forward(value))
        return

    backward = lookup.author_for_slug if kind == Namespace.authors else lookup.category_for_slug
    name = backward(value)
    if name is None:
        typer.echo(f"No {kind.value} entry for slug '{value}'.", err=True)
        raise typer.Exit(1)
    typer.echo(name)


def export_cmd(
    out: Annotated[str, typer.Option("--out", help="Output file")] = "taxonomy.ts",
    fmt: Annotated[str, typer.Option("--format", help="ts or json")] = "ts",
    registry: RegistryOpt = None,
    ):
    """Write the registry as a TypeScript module or JSON for the site renderer."""
    settings = settings_or_fail(overrides={"registry_path": registry})
    try:
        reg = YamlRegistryStore(Path(settings.registry_path)).load()
    except OSError as e:
        _fail("Could not read registry", e)
    try:
        path = write_export(reg, Path(out), fmt)
    except ValueError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Export failed", e)
    typer.echo(f"Exported {len(reg.authors)} authors, {len(reg.categories)} categories to {path}")


def migrate_cmd(
    legacy: Annotated[Path, typer.Argument(help="Legacy taxonomy.ts module to import")],
    registry: RegistryOpt = None,
    ):
    """Import a legacy TypeScript registry, keeping its slugs and any existing entries."""
    settings = settings_or_fail(overrides={"registry_path": registry})
    store = YamlRegistryStore(Path(settings.registry_path))
    try:
        summary = run_migrate(legacy, store)
    except OSError as e:
        _fail("Migration failed", e)
    _echo_summary(summary, settings.registry_path)
