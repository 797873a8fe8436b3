from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import typer

from subreflow.config.settings import load_settings
from subreflow.exceptions import DocumentFormatError, SubReflowError
from subreflow.rules import get_rules, list_rulesets
from subreflow.services.analysis import analyze, summarize
from subreflow.services.document import build, ensure_recognizable, parse
from subreflow.services.reflow import fix as fix_cues
from subreflow.services.reflow import fix_one
from subreflow.utils.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)
log = get_logger(__name__)

STDIN_MARKER = "-"


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except SubReflowError as exc:
        typer.echo(f"{exc.label()}: {exc.message}", err=True)
        raise typer.Exit(code=exc.exit_code)


def _read_document(source: str, encoding: str) -> str:
    if source == STDIN_MARKER:
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.is_file():
        raise DocumentFormatError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise DocumentFormatError(f"Cannot decode {path} as {encoding}: {exc.reason}") from exc


def _write_document(text: str, output: str | None, encoding: str) -> None:
    if output is None or output == STDIN_MARKER:
        typer.echo(text)
        return
    path = Path(output).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding=encoding)
    log.info("Wrote %s", path)


@app.command()
def fix(
    input_path: str = typer.Argument(..., metavar="INPUT", help="Subtitle file to reflow ('-' for stdin)."),
    output: str = typer.Option(None, "--output", "-o", help="Write the result here instead of stdout."),
    only: int = typer.Option(None, "--only", help="Reflow only the cue at this 1-based position."),
    max_chars: int = typer.Option(None, "--max-chars", help="Maximum visible characters per line."),
    max_lines: int = typer.Option(None, "--max-lines", help="Maximum lines per cue."),
    log_level: str = typer.Option(None, "--log-level", help="Logging level (overrides config)."),
) -> None:
    """Reflow subtitle cues so every line and cue fits the layout limits."""
    with _reported_errors():
        settings = load_settings(max_chars=max_chars, max_lines=max_lines, log_level=log_level)
        configure_logging(settings.log_level)
        rules = get_rules(settings.language)
        limits = settings.limits()

        cues = parse(_read_document(input_path, settings.encoding))
        ensure_recognizable(cues)
        if only is None:
            fixed = fix_cues(cues, rules=rules, limits=limits)
        else:
            fixed = fix_one(cues, only, rules=rules, limits=limits)

        _write_document(build(fixed), output, settings.encoding)
        typer.echo(f"{len(cues)} cue(s) in, {len(fixed)} cue(s) out", err=True)


@app.command()
def check(
    input_path: str = typer.Argument(..., metavar="INPUT", help="Subtitle file to check ('-' for stdin)."),
    strict: bool = typer.Option(False, "--strict", help="Fail when any cue violates the layout limits."),
    json_output: bool = typer.Option(False, "--json", help="Output the report as JSON."),
) -> None:
    """Report cues that violate the layout limits without changing them."""
    with _reported_errors():
        settings = load_settings()
        configure_logging(settings.log_level)
        rules = get_rules(settings.language)

        cues = parse(_read_document(input_path, settings.encoding))
        ensure_recognizable(cues)
        reports = analyze(cues, rules=rules, limits=settings.limits())
        stats = summarize(reports)

        if json_output:
            payload = {
                "summary": stats.to_dict(),
                "cues": [
                    {
                        "index": r.index,
                        "lines": r.line_count,
                        "max_visible_len": r.max_visible_len,
                        "violations": list(r.violations),
                        "natural_break": r.natural_break,
                    }
                    for r in reports
                ],
            }
            typer.echo(json.dumps(payload, indent=2))
        else:
            for r in reports:
                if r.is_valid:
                    continue
                typer.echo(f"#{r.index}\t{r.line_count} line(s)\tmax {r.max_visible_len}\t{', '.join(r.violations)}")
            typer.echo(f"{stats.valid}/{stats.total} cue(s) valid, {stats.invalid} invalid")

        if strict and stats.invalid:
            raise SubReflowError(f"{stats.invalid} cue(s) violate the layout limits.")


@app.command()
def languages() -> None:
    """List available rule tables."""
    for language in list_rulesets():
        typer.echo(language)


@app.command()
def config() -> None:
    """Print resolved config."""
    with _reported_errors():
        settings = load_settings()
        typer.echo(json.dumps(settings.to_public_dict(), indent=2))


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
