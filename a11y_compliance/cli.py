"""
Command-Line Interface

CLI using rich for colored output. Runs the contrast evaluator, the
palette catalog and full compliance audits of JSON element trees, for
developers and CI jobs.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .auditor import ComplianceAuditor
from .checks.contrast import evaluate
from .config import load_config
from .errors import InvalidColorFormat
from .models import ComplianceReport, Config, ContrastResult
from .palette import ColorPair, check_application_colors
from .tree import load_tree


console = Console()

LEVEL_STYLES = {"AAA": "green", "AA": "yellow", "Fail": "red"}


def _setup_logging(debug: bool) -> None:
    logger = logging.getLogger("a11y_compliance")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


output_option = click.option(
    '--output',
    default='rich',
    type=click.Choice(['rich', 'json'], case_sensitive=False),
    help='Output format: rich (colored terminal) or json (for CI)'
)


@click.group()
@click.option(
    '--env-file',
    default=None,
    type=click.Path(exists=True),
    help='Path to .env file (defaults to ./.env)'
)
@click.option('--debug', is_flag=True, help='Verbose logging and tracebacks')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, env_file: Optional[str], debug: bool):
    """
    a11y-compliance - WCAG Compliance Checks

    Evaluate color contrast, audit touch targets in an element tree,
    and report on the application palette.

    Examples:

      # One color pair
      a11y-compliance contrast "#FFFFFF" "#1C8282"

      # Large text (3:1 rule)
      a11y-compliance contrast "#767676" "#FFFFFF" --large

      # Audit an exported element tree as JSON
      a11y-compliance audit page.json --output json
    """
    _setup_logging(debug)
    try:
        config = load_config(Path(env_file) if env_file else None)
    except ValidationError as e:
        console.print(f"[red]❌ Invalid configuration: {escape(str(e))}[/red]")
        sys.exit(2)
    ctx.obj = {"config": config, "debug": debug}


@main.command()
@click.argument('foreground')
@click.argument('background')
@click.option('--large', is_flag=True, help='Evaluate as large text (3:1 requirement)')
@output_option
def contrast(foreground: str, background: str, large: bool, output: str):
    """Evaluate the contrast of FOREGROUND text on BACKGROUND."""
    try:
        result = evaluate(foreground, background, is_large_text=large)
    except InvalidColorFormat as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(2)

    if output == 'json':
        print(json.dumps(result.model_dump(), indent=2))
    else:
        _print_contrast(result)

    sys.exit(0 if result.passes else 1)


@main.command()
@output_option
def palette(output: str):
    """Report contrast for the application's named color combinations."""
    checks = check_application_colors()

    if output == 'json':
        print(json.dumps(
            [{"name": c.pair.name, **c.result.model_dump()} for c in checks],
            indent=2
        ))
        return

    passed = [c for c in checks if c.result.passes]
    console.print()
    console.print(Panel.fit("[bold]WCAG Color Contrast Report[/bold]", border_style="cyan"))
    console.print(f"✅ Passed: {len(passed)}/{len(checks)} combinations")
    console.print(f"❌ Failed: {len(checks) - len(passed)}/{len(checks)} combinations\n")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Combination", style="cyan")
    table.add_column("Foreground")
    table.add_column("Background")
    table.add_column("Ratio", justify="right")
    table.add_column("Level", justify="center")
    for c in checks:
        style = LEVEL_STYLES[c.result.level]
        table.add_row(
            c.pair.name,
            c.result.foreground,
            c.result.background,
            f"{c.result.ratio}:1",
            f"[{style}]{c.result.level}[/]"
        )
    console.print(table)


@main.command()
@click.argument('tree_json', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--min-size',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Minimum touch-target size in px'
)
@output_option
@click.pass_context
def audit(ctx: click.Context, tree_json: str, min_size: Optional[float], output: str):
    """
    Audit TREE_JSON for touch-target size, markup semantics and color contrast.

    The file holds either a root element node or an object with a
    "root" node and an optional "colors" list of
    {name, foreground, background, large} pairs.
    """
    config = ctx.obj["config"]
    if min_size is not None:
        try:
            config = Config.model_validate({**config.model_dump(), "min_touch_target": min_size})
        except ValidationError as e:
            console.print(f"[red]❌ Invalid --min-size: {escape(str(e))}[/red]")
            sys.exit(2)

    try:
        data = json.loads(Path(tree_json).read_text(encoding="utf-8"))
        root = load_tree(data)
        pairs = [
            ColorPair(
                name=entry["name"],
                foreground=entry["foreground"],
                background=entry["background"],
                is_large_text=entry.get("large", False),
            )
            for entry in data.get("colors", [])
        ] if "root" in data else None
        report = ComplianceAuditor(config).audit(root=root, color_pairs=pairs)
    except InvalidColorFormat as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(2)
    except (ValueError, KeyError) as e:
        console.print(f"[red]❌ Invalid element tree: {escape(str(e))}[/red]")
        if ctx.obj["debug"]:
            console.print_exception()
        sys.exit(2)

    if output == 'json':
        print(json.dumps(report.model_dump(), indent=2))
    else:
        _print_report(report)

    sys.exit(0 if report.passed else 1)


def _print_contrast(result: ContrastResult):
    style = LEVEL_STYLES[result.level]
    size_class = "large text" if result.is_large_text else "normal text"
    console.print(
        f"{result.foreground} on {result.background}: "
        f"[bold {style}]{result.ratio}:1 ({result.level})[/bold {style}] "
        f"- requires {result.required_ratio}:1 for {size_class}"
    )


def _print_report(report: ComplianceReport):
    console.print()
    console.print(Panel.fit(
        f"[bold]Accessibility Compliance[/bold]\n"
        f"Score: {report.score}/100 (grade {report.get_grade()})",
        border_style="cyan"
    ))

    if report.touch_targets is not None:
        t = report.touch_targets
        console.print(f"\n[bold]👆 Touch targets[/bold]: {t.compliant}/{t.total} compliant")

    if report.markup is not None and report.markup.checked:
        m = report.markup
        console.print(f"[bold]🏷  Markup[/bold]: {m.checked - len(m.issues)}/{m.checked} valid")

    if report.contrast:
        failed = sum(1 for r in report.contrast.values() if not r.passes)
        console.print(f"[bold]🎨 Contrast[/bold]: {len(report.contrast) - failed}/{len(report.contrast)} pass")

    if report.issues:
        console.print(f"\n[bold]🔍 Issues Found ({len(report.issues)})[/bold]")
        for issue in report.issues:
            marker = "🔴" if issue.severity == "high" else "🟡"
            console.print(f"  {marker} {escape(f'[{issue.dimension}]')} {escape(issue.description)}")
            console.print(f"     💡 {escape(issue.suggestion)}\n")
    else:
        console.print("\n[bold green]✓ No issues found![/bold green]")

    if report.recommendations:
        console.print("\n[bold]💡 Recommendations[/bold]")
        for i, recommendation in enumerate(report.recommendations, 1):
            console.print(f"  {i}. {recommendation}")
    console.print()


if __name__ == "__main__":
    main()
