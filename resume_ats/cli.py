"""
resume-ats Command Line Interface

Provides CLI commands for structuring resumes and auditing them
for ATS compatibility from the terminal.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="resume-ats",
    help="Resume structuring and ATS compatibility auditing CLI",
    add_completion=False,
)
console = Console()

SEVERITY_STYLES = {"high": "red", "medium": "yellow", "low": "dim"}


def _require_file(path: Path) -> None:
    if not path.is_file():
        console.print(f"[red]Error: File does not exist: {path}[/red]")
        raise typer.Exit(1)


@app.command()
def version():
    """Show application version."""
    from resume_ats import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from resume_ats.utils.config import get_settings
    from resume_ats.utils.constants import APP_DISPLAY_NAME, SUPPORTED_RESUME_FORMATS

    settings = get_settings()

    table = Table(title=f"{APP_DISPLAY_NAME} Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Supported Formats", ", ".join(SUPPORTED_RESUME_FORMATS))
    table.add_row("Header Line Threshold", str(settings.parser.short_line_threshold))
    table.add_row("Duplicate Probe Length", str(settings.parser.duplicate_probe_length))
    table.add_row("Min File Size (bytes)", str(settings.ats.min_file_size_bytes))
    table.add_row(
        "Word Count Range",
        f"{settings.ats.min_word_count}-{settings.ats.max_word_count}",
    )
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def parse(
    file: Path = typer.Argument(..., help="Resume file (PDF, DOCX, DOC or TXT)"),
    as_json: bool = typer.Option(False, "--json", help="Print the parsed resume as JSON"),
):
    """Extract and structure a resume file."""
    from resume_ats.exceptions import ResumeATSError
    from resume_ats.nlp import LineKind, classify_line, dedupe_lines, get_resume_parser, strip_markdown

    _require_file(file)

    try:
        resume = get_resume_parser().parse_file(file)
    except ResumeATSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(resume.model_dump_json(indent=2))
        return

    console.print(f"\n[bold cyan]{escape(resume.display_name)}[/bold cyan]")
    console.print(f"[dim]{'─' * 50}[/dim]")
    for label, value in (
        ("Email", resume.metadata.email),
        ("Phone", resume.metadata.phone),
        ("LinkedIn", resume.metadata.linkedin),
    ):
        if value:
            console.print(f"[bold]{label}:[/bold] {escape(value)}")
    console.print(f"[bold]Words:[/bold] {resume.word_count}")

    table = Table(title="Sections")
    table.add_column("Section", style="cyan")
    table.add_column("Lines", justify="right")
    table.add_column("Bullets", justify="right")
    table.add_column("Preview", style="dim")

    for key, content in resume.sections.items():
        lines = dedupe_lines(content)
        bullets = sum(1 for line in lines if classify_line(line) == LineKind.BULLET)
        preview = strip_markdown(lines[0])[:60] if lines else ""
        table.add_row(key, str(len(lines)), str(bullets), escape(preview))

    console.print(table)


@app.command()
def scan(
    file: Path = typer.Argument(..., help="Resume file (PDF, DOCX, DOC or TXT)"),
    as_json: bool = typer.Option(False, "--json", help="Print the audit result as JSON"),
):
    """Audit a resume file for ATS compatibility."""
    from resume_ats.core.ats import get_ats_scanner
    from resume_ats.exceptions import ResumeATSError
    from resume_ats.nlp import extract_text

    _require_file(file)

    try:
        resume_text = extract_text(file)
    except ResumeATSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    result = get_ats_scanner().scan_file(file, resume_text)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    score = result.compatibility_score
    color = "green" if score >= 80 else "yellow" if score >= 60 else "red"
    console.print(f"\n[bold]ATS Compatibility Score:[/bold] [{color}]{score}/100[/{color}]")

    if result.issues or result.warnings:
        table = Table(title="Findings")
        table.add_column("Kind")
        table.add_column("Severity")
        table.add_column("Category", style="cyan")
        table.add_column("Description")

        for kind, findings in (("Issue", result.issues), ("Warning", result.warnings)):
            for finding in findings:
                style = SEVERITY_STYLES.get(finding.severity, "white")
                table.add_row(
                    kind,
                    f"[{style}]{finding.severity}[/{style}]",
                    finding.category,
                    escape(finding.description),
                )

        console.print(table)
    else:
        console.print("[green]✓ No issues found[/green]")

    if result.recommendations:
        console.print("\n[bold]Recommendations:[/bold]")
        for i, recommendation in enumerate(result.recommendations, 1):
            console.print(f"  {i}. {escape(recommendation)}")


if __name__ == "__main__":
    app()
