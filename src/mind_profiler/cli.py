"""Command-line interface for Mind Profiler."""

import logging
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from mind_profiler import __version__

console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Logging level (default from MP_LOG_LEVEL)")
def main(log_level: str | None) -> None:
    """Mind Profiler - stylometric fingerprints of a writer's documents."""
    from mind_profiler.config import get_settings

    _configure_logging(log_level or get_settings().log_level)


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--timeframe", "-t", default=None, help="7days, 30days, 3months or 6months")
@click.option("--now", "now_text", default=None, help="Reference time (ISO 8601) instead of the current time")
@click.option("--output", "-o", type=click.Path(), help="Output file for the result (JSON)")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
@click.option("--workers", "-w", type=int, default=None, help="Threads for per-document extraction")
@click.option("--narrative", is_flag=True, help="Also generate a narrative profile with the configured LLM")
@click.option("--verbose", "-v", is_flag=True, help="Show progress")
def analyze(
    path: str,
    timeframe: str | None,
    now_text: str | None,
    output: str | None,
    as_json: bool,
    workers: int | None,
    narrative: bool,
    verbose: bool,
) -> None:
    """Analyze a corpus file (JSON, JSONL or a directory of .txt files).

    Example:
        mindprof analyze notes.jsonl -t 3months -o profile.json
    """
    from mind_profiler.analyzer import AnalyticsEngine
    from mind_profiler.config import get_settings
    from mind_profiler.ingest.loader import DocumentLoadError, load_documents
    from mind_profiler.ingest.timeframe import filter_by_timeframe

    settings = get_settings()
    timeframe = timeframe or settings.default_timeframe

    now = None
    if now_text:
        try:
            now = datetime.fromisoformat(now_text)
        except ValueError:
            raise click.BadParameter(f"Not an ISO 8601 timestamp: {now_text}", param_hint="--now")

    try:
        documents = load_documents(Path(path))
    except DocumentLoadError as e:
        raise click.ClickException(str(e))

    def progress_callback(progress):
        console.print(f"  [dim]{progress.phase}:[/dim] {progress.message}")

    engine = AnalyticsEngine(
        max_workers=workers or settings.max_workers,
        progress_callback=progress_callback if verbose else None,
    )

    with console.status("Analyzing corpus..."):
        result = engine.analyze(documents, timeframe, now)

    if as_json:
        console.print_json(result.to_json())
    else:
        console.print(f"[bold]Corpus:[/bold] {len(documents)} document(s), timeframe {timeframe}\n")
        _print_summary(result)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.to_json(), encoding="utf-8")
        console.print(f"\n[green]OK[/green] Result saved to {output_path}")

    if narrative:
        from mind_profiler.narrative import LLMNarrativeGenerator

        selected = filter_by_timeframe(documents, timeframe, now)
        with console.status("Generating narrative profile..."):
            profile = LLMNarrativeGenerator().generate(selected, result.writing_style)

        if profile is None:
            console.print("[yellow]No narrative profile generated[/yellow]")
        else:
            console.print("\n[bold]Narrative Profile[/bold]")
            console.print(profile.intellectual_approach)
            for strength in profile.strengths:
                console.print(f"  + {strength}")
            for weakness in profile.weaknesses:
                console.print(f"  - {weakness}")


def _print_summary(result) -> None:
    """Print the headline measurements of a result."""
    archetype = result.cognitive_archetype
    style = result.writing_style

    console.print(f"[bold]Archetype:[/bold] {archetype.type.value} ({archetype.confidence:.0%} confidence)")
    console.print(f"[dim]{archetype.description}[/dim]\n")

    table = Table(title="Writing Style")
    table.add_column("Metric", style="cyan")
    table.add_column("Score", style="green")
    table.add_column("Percentile")

    table.add_row("Formality", f"{style.formality.score:.2f}", str(style.formality.percentile))
    table.add_row("Complexity", f"{style.complexity.score:.2f}", str(style.complexity.percentile))
    signatures = style.cognitive_signatures
    table.add_row("Nested hypotheticals", f"{signatures.nested_hypotheticals:.2f}", "")
    table.add_row("Anaphoric reasoning", f"{signatures.anaphoric_reasoning:.2f}", "")
    table.add_row("Structural analogies", f"{signatures.structural_analogies:.2f}", "")
    table.add_row("Dialectical vs didactic", f"{signatures.dialectical_vs_didactic:.2f}", "")
    console.print(table)

    topics = result.topic_distribution
    console.print("\n[bold]Topics:[/bold]")
    for share in topics.dominant:
        console.print(f"  {share.name}: {share.percentage}%")
    console.print(f"  [dim]{topics.interpretation}[/dim]")

    trajectory = result.temporal_evolution.trajectory
    console.print(f"\n[bold]Trajectory:[/bold] {trajectory.type.value}")
    console.print(f"  [dim]{trajectory.description}[/dim]")

    console.print(f"\n[bold]Longitudinal points:[/bold] {len(result.longitudinal_patterns)}")


@main.command()
def markers() -> None:
    """List the marker categories used for measurement."""
    from mind_profiler.style.markers import DEFAULT_MARKERS

    table = Table(title="Marker Library")
    table.add_column("Category", style="cyan")
    table.add_column("Kind")
    table.add_column("Patterns", justify="right")
    table.add_column("Weight", justify="right")

    for name, rule in DEFAULT_MARKERS.categories.items():
        table.add_row(name, "feature", str(len(rule.patterns)), f"{rule.weight:g}")
    for archetype, rule in DEFAULT_MARKERS.archetypes.items():
        table.add_row(archetype.value, "archetype", str(len(rule.patterns)), f"{rule.weight:g}")
    for topic in DEFAULT_MARKERS.topics:
        table.add_row(topic.name, "topic", str(len(topic.rule.patterns)), f"{topic.rule.weight:g}")

    console.print(table)


@main.command()
def status() -> None:
    """Show configuration and narrative backend status."""
    from mind_profiler.config import get_settings
    from mind_profiler.llm import LLMClient

    settings = get_settings()
    console.print("[bold]Mind Profiler Status[/bold]\n")
    console.print(f"Default timeframe: {settings.default_timeframe}")
    console.print(f"Workers: {settings.max_workers}")
    console.print(f"LLM provider: {settings.llm_provider}")

    client = LLMClient()
    if client.is_available:
        console.print(f"[green]OK[/green] Narrative backend reachable ({client.model})")
    else:
        console.print("[yellow]--[/yellow] Narrative backend not reachable (analysis still works)")


if __name__ == "__main__":
    main()
