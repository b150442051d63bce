"""
Command-line resume matcher.

Usage:
    internmatch match resume.pdf --job posting.txt
    internmatch match resume.txt --job-text "Looking for Python and SQL"
    internmatch match resume.pdf --job posting.txt --json
    internmatch keywords posting.txt --top 20
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from internmatch.contexts.intake import TextSourceError, load_document_text
from internmatch.contexts.matching import KeywordTokenizer, analyze_match, load_keyword_config
from internmatch.contexts.matching.logger import _log_debug, setup_matching_logger
from internmatch.utils.logger import LOGS_PATH
from internmatch.utils.report_formatter import Column, TableFormatter, format_percentage

app = typer.Typer(help="Match a resume against a job description by keyword overlap.")

BAND_COLORS = {
    "strong": typer.colors.GREEN,
    "fair": typer.colors.YELLOW,
    "weak": typer.colors.RED,
}

REPORT_WIDTH = 72


def _fail(message: str) -> None:
    typer.echo(f"ERROR: {message}", err=True)
    raise typer.Exit(1)


def _load_config(config_path: Optional[Path]):
    try:
        return load_keyword_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


def _load_text(path: Path) -> str:
    try:
        return load_document_text(path)
    except (FileNotFoundError, TextSourceError) as e:
        _fail(str(e))


@app.command()
def match(
    resume: Path = typer.Argument(..., help="Resume file (.pdf or .txt)"),
    job: Optional[Path] = typer.Option(None, "--job", "-j", help="Job description file"),
    job_text: Optional[str] = typer.Option(None, "--job-text", help="Job description text"),
    config: Optional[Path] = typer.Option(None, "--config", help="Keyword config YAML"),
    as_json: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
    log: bool = typer.Option(False, "--log", help="Write a session log under INTERNMATCH_LOGS_PATH"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """Score a resume against a job description and suggest improvements."""
    log_dir = LOGS_PATH / f"match_{datetime.now():%Y%m%d_%H%M%S}" if log else None
    log_file = setup_matching_logger(log_dir, resume_name=resume.name, verbose=verbose)
    if log_file:
        _log_debug(f"Log file: {log_file}")

    if (job is None) == (job_text is None):
        _fail("Provide exactly one of --job or --job-text")

    keyword_config = _load_config(config)

    resume_text = _load_text(resume)
    if not resume_text.strip():
        _fail("Please upload a resume first")

    target_text = _load_text(job) if job is not None else job_text
    if not target_text.strip():
        _fail("Please enter a job description")

    analysis = analyze_match(resume_text, target_text, keyword_config)

    if as_json:
        typer.echo(json.dumps(analysis.to_dict(), indent=2))
        return

    result = analysis.result
    report = (
        TableFormatter(total_width=REPORT_WIDTH)
        .add_section_header(f"Resume match: {resume.name}")
        .add_labeled_list("Matched", result.matched_keywords)
        .add_labeled_list("Missing", result.missing_keywords)
        .add_blank_line()
        .add_text("Suggestions:")
        .add_bullets(analysis.suggestions)
        .render()
    )
    typer.echo(report)
    typer.secho(
        f"\nMatch score: {result.score}% ({analysis.band})",
        fg=BAND_COLORS[analysis.band],
        bold=True,
    )


@app.command()
def keywords(
    document: Path = typer.Argument(..., help="Document file (.pdf or .txt)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Keyword config YAML"),
    top: int = typer.Option(0, "--top", "-n", min=0, help="Only show the N most frequent keywords"),
):
    """List the keywords extracted from a document with occurrence counts."""
    tokenizer = KeywordTokenizer(_load_config(config))
    counts = tokenizer.keyword_counts(_load_text(document))
    total = sum(counts.values())

    # Counter.most_common keeps first-appearance order among equal counts
    rows = counts.most_common(top or None)

    table = TableFormatter(
        [Column("Keyword", 40), Column("Count", 8, ">"), Column("Share", 10, ">")],
        total_width=60,
    )
    table.add_section_header(f"Keywords: {document.name}").add_table_header().add_separator()
    for keyword, count in rows:
        table.add_row([keyword, count, format_percentage(count, total)])
    table.add_separator().add_text(f"{total} keywords ({len(counts)} unique)")

    typer.echo(table.render())


if __name__ == "__main__":
    app()
