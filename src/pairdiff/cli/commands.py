"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Callable, Optional

import typer

from pairdiff.cli.render import render_side_by_side, summary_line
from pairdiff.config import Settings, load_config
from pairdiff.core.canonical import canonicalize_json, minify_json
from pairdiff.core.export import to_json, unified_diff
from pairdiff.core.models import DiffResult
from pairdiff.core.pipeline import diff, diff_json
from pairdiff.core.utils.lines import split_lines
from pairdiff.errors import InputTooLargeError, InvalidInputError


logger = logging.getLogger(__name__)

LeftArg = Annotated[str, typer.Argument(help="Left (original) file")]
RightArg = Annotated[str, typer.Argument(help="Right (modified) file")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", "-f", help="unified, side or json")]
LeftLabelOpt = Annotated[Optional[str], typer.Option("--left-label", help="Label for the '---' header")]
RightLabelOpt = Annotated[Optional[str], typer.Option("--right-label", help="Label for the '+++' header")]
MaxLinesOpt = Annotated[Optional[int], typer.Option("--max-lines", help="Refuse inputs longer than this; 0 = unlimited")]
WidthOpt = Annotated[Optional[int], typer.Option("--width", help="Column width for side-by-side output")]
ColorOpt = Annotated[Optional[bool], typer.Option("--color/--no-color", help="Highlight changes in side-by-side output")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read(path: str, max_lines: int) -> str:
    """Read a UTF-8 input file, enforcing the line cap (0 = unlimited)."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)
    if max_lines and len(split_lines(text)) > max_lines:
        raise InputTooLargeError(f"{path} has more than {max_lines} lines")
    return text


def _run(
    left: str,
    right: str,
    differ: Callable[[str, str], DiffResult],
    settings: Settings,
    ) -> DiffResult:
    """Read both inputs and diff them, turning input errors into CLI failures."""
    try:
        left_text = _read(left, settings.max_input_lines)
        right_text = _read(right, settings.max_input_lines)
        return differ(left_text, right_text)
    except (InvalidInputError, InputTooLargeError) as e:
        _fail(str(e))


def _emit(result: DiffResult, settings: Settings) -> None:
    """Print the result in the configured output format."""
    if settings.output_format == "json":
        typer.echo(to_json(result))
        return
    if not result.stats.has_changes:
        typer.echo(summary_line(result.stats))
        return
    if settings.output_format == "side":
        for line in render_side_by_side(result.rows, settings.side_width, settings.color):
            typer.echo(line)
        typer.echo(summary_line(result.stats))
    else:
        typer.echo(unified_diff(result, settings.left_label, settings.right_label), nl=False)


def main_callback(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Compare two texts or JSON documents line by line."""
    settings = _settings(overrides={"log_level": log_level.upper() if log_level else None})
    logging.basicConfig(level=getattr(logging, settings.log_level), format="%(levelname)s: %(message)s")


def text_cmd(
    left: LeftArg,
    right: RightArg,
    fmt: FormatOpt = None,
    left_label: LeftLabelOpt = None,
    right_label: RightLabelOpt = None,
    max_lines: MaxLinesOpt = None,
    width: WidthOpt = None,
    color: ColorOpt = None,
    ):
    """Diff two text files."""
    settings = _settings(overrides={
        "output_format": fmt, "left_label": left_label, "right_label": right_label,
        "max_input_lines": max_lines, "side_width": width, "color": color,
    })
    _emit(_run(left, right, diff, settings), settings)


def json_cmd(
    left: LeftArg,
    right: RightArg,
    fmt: FormatOpt = None,
    left_label: LeftLabelOpt = None,
    right_label: RightLabelOpt = None,
    max_lines: MaxLinesOpt = None,
    width: WidthOpt = None,
    color: ColorOpt = None,
    ):
    """Diff two JSON files after sorting keys and normalizing indentation."""
    settings = _settings(overrides={
        "output_format": fmt, "left_label": left_label, "right_label": right_label,
        "max_input_lines": max_lines, "side_width": width, "color": color,
    })
    # .json labels apply only where no flag, env var or config.yaml named one
    labels = {"left_label": "original.json", "right_label": "modified.json"}
    settings = settings.model_copy(
        update={k: v for k, v in labels.items() if k not in settings.model_fields_set}
    )
    _emit(_run(left, right, diff_json, settings), settings)


def stats_cmd(
    left: LeftArg,
    right: RightArg,
    as_json: Annotated[bool, typer.Option("--json", help="Treat inputs as JSON documents")] = False,
    max_lines: MaxLinesOpt = None,
    ):
    """Print only the change counts between two files."""
    settings = _settings(overrides={"max_input_lines": max_lines})
    result = _run(left, right, diff_json if as_json else diff, settings)
    logger.info("stats: %s", result.stats)
    typer.echo(json.dumps(result.stats.model_dump()))


def format_cmd(
    path: Annotated[str, typer.Argument(help="JSON file to format")],
    minify: Annotated[bool, typer.Option("--minify", help="Print on one line without whitespace")] = False,
    ):
    """Pretty-print a JSON file with sorted keys, or minify it."""
    settings = _settings()
    try:
        text = _read(path, settings.max_input_lines)
        typer.echo(minify_json(text) if minify else canonicalize_json(text))
    except (InvalidInputError, InputTooLargeError) as e:
        _fail(str(e))
