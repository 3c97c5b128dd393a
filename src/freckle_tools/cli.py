"""CLI entry point for Freckle KPI reports."""

import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .api.client import FreckleClient
from .api.librato import LibratoClient
from .api.projects import ProjectsAPI
from .config import Config, load_config
from .exceptions import FreckleError
from .kpi.metrics import Gauge, collect_gauges
from .kpi.periods import GRANULARITIES
from .kpi.projects import ProjectKpi, get_project_kpis_per_period
from .models import Project
from .ui.report import build_report_document, print_project_report

console = Console(stderr=True)
log = logging.getLogger("freckle_tools")


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def select_projects(projects_api: ProjectsAPI, names: tuple[str, ...]) -> list[Project]:
    """
    List projects, keeping only those named exactly in ``names``.

    An empty ``names`` selects every project. Listing stops as soon as every
    requested name has been seen. A listing failure is reported and the
    projects gathered so far are returned.
    """
    wanted = set(names)
    found: set[str] = set()
    selected: list[Project] = []

    try:
        for project in projects_api.iter_all():
            if wanted:
                if project.name not in wanted:
                    continue
                found.add(project.name)
            selected.append(project)
            if wanted and found == wanted:
                break
    except FreckleError as e:
        console.print(
            f"[yellow]An error occurred while getting the project list:[/yellow] {escape(e.format_message())}",
            highlight=False,
        )

    for missing in sorted(wanted - found):
        console.print(f"[yellow]No project named '{escape(missing)}'[/yellow]", highlight=False)

    return selected


def submit_metrics(config: Config, gauges: list[Gauge]) -> None:
    """Push gauges to Librato once. Failures are reported, never fatal."""
    if not config.librato_configured:
        console.print("[yellow]LIBRATO_ACCOUNT or LIBRATO_TOKEN not set, skipping metrics.[/yellow]")
        return

    try:
        with LibratoClient(config.librato_account, config.librato_token) as librato:
            librato.post_metrics(gauges)
        log.info("Posted %d gauges to Librato", len(gauges))
    except FreckleError as e:
        console.print(
            f"[red]An error occurred while POSTing the metrics to librato:[/red] {escape(e.format_message())}",
            highlight=False,
        )


@click.command()
@click.version_option(__version__)
@click.option(
    "--period",
    type=click.Choice(GRANULARITIES),
    default=None,
    help="Time period to build the breakdown on (default: year)",
)
@click.option(
    "--all",
    "all_projects",
    is_flag=True,
    help="Report every project, ignoring the projects listed in the settings file",
)
@click.option("--librato", is_flag=True, help="Push metrics to Librato")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Log API requests to stderr")
@click.argument("project_names", nargs=-1)
def cli(
    period: Optional[str],
    all_projects: bool,
    librato: bool,
    as_json: bool,
    verbose: bool,
    project_names: tuple[str, ...],
):
    """Report invoiced amounts and billable hours for Freckle projects.

    Give PROJECT_NAMES to restrict the report to those projects. Without
    them the "projects" list of the settings file is used, if any; pass
    --all to report every project regardless.
    """
    configure_logging(verbose)
    config = load_config()

    granularity = period or config.settings.period
    if project_names:
        names = project_names
    elif all_projects:
        names = ()
    else:
        names = tuple(config.settings.projects)

    try:
        gauges: list[Gauge] = []
        documents: list[dict] = []

        with FreckleClient(config) as client:
            projects_api = ProjectsAPI(client)
            projects = select_projects(projects_api, names)

            kpis = [ProjectKpi(project, projects_api.get_entries(project.id)) for project in projects]

        for kpi in kpis:
            periods = get_project_kpis_per_period(kpi, granularity)

            if as_json:
                documents.append(build_report_document(kpi, periods, granularity))
            else:
                print_project_report(kpi, periods, granularity)

            gauges.extend(collect_gauges(kpi, periods, granularity))

        if as_json:
            click.echo(json.dumps({"projects": documents}, indent=2))

        log.debug("Collected %d gauges", len(gauges))
        if librato:
            submit_metrics(config, gauges)

    except FreckleError:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)
