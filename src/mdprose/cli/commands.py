"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdprose.config import Settings, load_config
from mdprose.core.annotations import parse_annotations, strip_annotations
from mdprose.core.goals import goal_progress
from mdprose.core.models import AnnotationType, DocumentStats, GoalType
from mdprose.core.normalize import normalize
from mdprose.core.parse import parse_file
from mdprose.core.pipeline import run_stats
from mdprose.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _stats(path: str, settings: Settings) -> list[DocumentStats]:
    """Run the stats pipeline, failing cleanly on bad input or an empty path."""
    if not Path(path).exists():
        _fail(f"Path not found: {path}")
    try:
        docs = run_stats(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    if not docs:
        _fail(f"No markdown files found under {path}")
    return docs


def _read(path: str) -> str:
    p = Path(path)
    if not p.is_file():
        _fail(f"Not a file: {path}")
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Could not read {path}", e)


def count_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to count")],
    goal: Annotated[Optional[int], typer.Option("--goal", help="Word goal for the total")] = None,
    goal_type: Annotated[Optional[GoalType], typer.Option("--goal-type", help="min, max, or approx")] = None,
    exclude_bib: Annotated[bool, typer.Option("--exclude-bibliography", help="Leave bibliography out of counts")] = False,
    ):
    """Count prose words per document, with a total and optional goal status."""
    settings = _settings(overrides={
        "goal": goal, "goal_type": goal_type, "exclude_bibliography": exclude_bib or None,
    })
    docs = _stats(path, settings)

    for d in docs:
        line = f"  {d.path}: {d.word_count} words"
        if settings.exclude_bibliography and d.prose_word_count != d.word_count:
            line += f" ({d.prose_word_count} excluding bibliography)"
        typer.echo(line)

    total = sum(d.prose_word_count for d in docs)
    typer.echo(f"Total: {total} words in {len(docs)} document(s)")

    progress = goal_progress(total, settings.goal, settings.goal_type, settings.thresholds)
    if progress:
        typer.echo(
            f"Goal ({progress.goal_type.value}): {progress.word_count}/{progress.goal} "
            f"[{progress.ratio:.0%}] - {progress.status.value}"
        )


def plain_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to normalize")],
    ):
    """Print the plain-text rendering of a file body (frontmatter dropped)."""
    settings = _settings()
    if not Path(path).is_file():
        _fail(f"Not a file: {path}")
    try:
        parsed = parse_file(Path(path), settings.parser_config)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        _fail(f"Could not read {path}", e)
    typer.echo(normalize(parsed.markdown), nl=False)


def strip_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to strip")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write to this file instead of stdout")] = None,
    ):
    """Remove annotation comments, keeping all other markdown intact."""
    _settings()
    result = strip_annotations(_read(path))
    if out:
        try:
            Path(out).write_text(result, encoding="utf-8")
        except OSError as e:
            _fail(f"Could not write {out}", e)
        typer.echo(f"  {path} -> {out}")
    else:
        typer.echo(result, nl=False)


def stats_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to analyze")],
    as_json: Annotated[bool, typer.Option("--json", help="Emit JSON")] = False,
    nesting: Annotated[Optional[int], typer.Option("--max-nesting", help="Deepest heading that opens a section")] = None,
    ):
    """Show word counts per outline section."""
    settings = _settings(overrides={"max_nesting": nesting})
    docs = _stats(path, settings)

    if as_json:
        typer.echo(json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False))
        return

    for d in docs:
        typer.echo(f"{d.path}: {d.word_count} words")
        for s in d.sections:
            label = s.title or ("§ Section Break" if s.pseudo else "(untitled)")
            flag = " [bibliography]" if s.bibliography else ""
            typer.echo(f"  {'  ' * max(s.level - 1, 0)}{label}: {s.word_count}{flag}")


def annotations_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to scan")],
    kind: Annotated[Optional[AnnotationType], typer.Option("--type", help="Only this annotation type")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Emit JSON")] = False,
    ):
    """List task, comment, and reference annotations."""
    _settings()
    found = [a for a in parse_annotations(_read(path)) if kind is None or a.type == kind]

    if as_json:
        typer.echo(json.dumps([a.model_dump(mode="json") for a in found], indent=2, ensure_ascii=False))
        return
    if not found:
        typer.echo("No annotations found.")
        return
    for a in found:
        box = ("[x] " if a.completed else "[ ] ") if a.type == AnnotationType.task else ""
        typer.echo(f"  {a.offset:>6}  {a.type.value:<9} {box}{a.text}")
