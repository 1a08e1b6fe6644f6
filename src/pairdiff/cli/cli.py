"""CLI entrypoint: Typer app definition and command registration"""

import typer

from pairdiff.cli.commands import format_cmd, json_cmd, main_callback, stats_cmd, text_cmd


app = typer.Typer(name="pairdiff", no_args_is_help=True, help="Line and character diff for text and JSON")

app.callback()(main_callback)
app.command(name="text")(text_cmd)
app.command(name="json")(json_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="format")(format_cmd)
