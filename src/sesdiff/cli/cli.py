"""CLI entrypoint: Typer app definition and command registration"""

import typer

from sesdiff.cli.commands import diff_cmd


app = typer.Typer(
    name="sesdiff",
    add_completion=False,
    help="Compute the shortest edit script between two files",
)

app.command(name="diff")(diff_cmd)
