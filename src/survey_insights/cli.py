from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .chain import run_analysis
from .config import get_api_key, load_settings
from .errors import SurveyInputError, SurveyInsightsError, describe_failure
from .ingest import load_survey_csv, survey_from_text
from .insights import extract_statistics
from .llm.resolver import resolve_model
from .models import ResolutionReport
from .report import render_markdown

app = typer.Typer(add_completion=False, help="Survey Insights (Gemini-backed survey analysis)")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log discovery, probes and generation steps"),
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _api_key(option: Optional[str]) -> Optional[str]:
    return option if option else get_api_key()


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SurveyInputError(f"{path.name} is not valid UTF-8 text: {e}") from e


@app.command()
def analyze(
    data: Optional[Path] = typer.Option(None, "--data", exists=True, dir_okay=False, help="Path to survey CSV"),
    text_file: Optional[Path] = typer.Option(
        None, "--text-file", exists=True, dir_okay=False, help="Plain text file, one response per line"
    ),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Google AI API key (default: GOOGLE_API_KEY)"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write the Markdown report here instead of stdout"),
):
    """
    Analyze survey responses and print analysis, recommendations and statistics.
    """
    if (data is None) == (text_file is None):
        typer.echo("Provide exactly one of --data or --text-file.", err=True)
        raise typer.Exit(code=2)

    key = _api_key(api_key)
    try:
        if data is not None:
            survey = load_survey_csv(data)
            typer.echo(f"Loaded {survey.response_count} responses from column '{survey.column}'", err=True)
        else:
            survey = survey_from_text(_read_text(text_file))

        settings = load_settings()
        model = resolve_model(key, settings=settings)
        outcome = run_analysis(survey.text, model)
    except SurveyInsightsError as e:
        typer.echo(f"ERROR: {describe_failure(e, key)}", err=True)
        raise typer.Exit(code=1)

    report_md = render_markdown(outcome)
    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(report_md, encoding="utf-8")
        typer.echo(f"Report: {out}")
    else:
        typer.echo(report_md)


@app.command()
def models(
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Google AI API key (default: GOOGLE_API_KEY)"),
):
    """
    Resolve a working model and show what was tried.
    """
    key = _api_key(api_key)
    report = ResolutionReport()
    try:
        model = resolve_model(key, settings=load_settings(), report=report)
    except SurveyInsightsError as e:
        typer.echo(f"ERROR: {describe_failure(e, key)}", err=True)
        raise typer.Exit(code=1)

    if report.discovery_error:
        typer.echo(f"Discovery failed: {report.discovery_error}")
    typer.echo(f"Discovered: {', '.join(report.discovered) if report.discovered else 'none'}")
    typer.echo("Candidates:")
    for name in report.candidates:
        typer.echo(f"  - {name}")
    typer.echo(f"Selected: {model.model_name}")


@app.command()
def stats(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Analysis text to scan"),
):
    """
    Print statistics found in an analysis text as JSON.

    Exits with code 1 when no statistics are recognizable.
    """
    try:
        text = _read_text(path)
    except SurveyInputError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    record = extract_statistics(text)
    if record is None:
        typer.echo("No statistics found.", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(record.as_dict(), indent=2, sort_keys=True))
