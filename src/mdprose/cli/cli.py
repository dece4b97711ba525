"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdprose.cli.commands import annotations_cmd, count_cmd, plain_cmd, stats_cmd, strip_cmd


app = typer.Typer(name="mdprose", no_args_is_help=True, help="Markdown-aware word counts and plain text")

app.command(name="count")(count_cmd)
app.command(name="plain")(plain_cmd)
app.command(name="strip")(strip_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="annotations")(annotations_cmd)
