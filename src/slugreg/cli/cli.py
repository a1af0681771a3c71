"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from slugreg.cli.commands import (
    export_cmd, generate_cmd, lookup_cmd, migrate_cmd, settings_or_fail, validate_cmd,
)
from slugreg.logs import configure_logging


app = typer.Typer(name="slugreg", no_args_is_help=True, help="Stable slug registry for author and category names")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
    ):
    """Maintain and validate the name -> slug registry."""
    configure_logging("DEBUG" if verbose else settings_or_fail().log_level)


app.command(name="generate")(generate_cmd)
app.command(name="validate")(validate_cmd)
app.command(name="lookup")(lookup_cmd)
app.command(name="export")(export_cmd)
app.command(name="migrate")(migrate_cmd)
