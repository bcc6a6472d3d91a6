"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdcolor.cli.commands import render_cmd


app = typer.Typer(name="mdcolor", add_completion=False, help="ANSI colorized rendering of Markdown files")

app.command(name="render")(render_cmd)
