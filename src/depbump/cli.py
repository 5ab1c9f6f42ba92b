"""Command-line interface for depbump.

Provides commands to list available dependency updates and to install a
selected subset of them.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from depbump.config import DEFAULT_REGISTRY_URL, RegistryOptions, Settings
from depbump.models import DependencyRecord, DependencySelection, UpdateCandidate, UpdateTarget
from depbump.package_manager import InstallError, detect_package_manager, install
from depbump.prompt import select_updates
from depbump.reporters import ConsoleReporter, MarkdownReporter
from depbump.resolvers import UpdateResolver
from depbump.scanners import BaseScanner, get_scanner

app = typer.Typer(
    name="depbump",
    help="Find newer versions of your npm dependencies and install the ones you pick.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("depbump")


ProductionOption = Annotated[
    bool,
    typer.Option("--production", "-P", help='Check only "dependencies"'),
]
DevelopmentOption = Annotated[
    bool,
    typer.Option("--development", "-D", help='Check only "devDependencies"'),
]
OptionalOption = Annotated[
    bool,
    typer.Option("--optional", "-O", help='Check only "optionalDependencies"'),
]
GlobalOption = Annotated[
    bool,
    typer.Option("--global", "-g", help="Check global packages instead of the current project"),
]
TargetOption = Annotated[
    UpdateTarget,
    typer.Option(
        "--target",
        "-t",
        case_sensitive=False,
        help=(
            "Which version counts as an update: latest stable, the highest in "
            "the declared semver range, a major/minor/patch bump only, or the "
            "newest prerelease channel"
        ),
    ),
]
RegistryOption = Annotated[
    str,
    typer.Option(
        "--registry",
        envvar="NPM_CONFIG_REGISTRY",
        help="Base URL of the npm registry",
    ),
]
TimeoutOption = Annotated[
    float,
    typer.Option("--timeout", min=1.0, help="Seconds allowed for each registry request"),
]
ConcurrencyOption = Annotated[
    Optional[int],
    typer.Option("--concurrency", min=1, help="Maximum registry requests in flight"),
]
InsecureOption = Annotated[
    bool,
    typer.Option("--insecure", help="Do not verify the registry's TLS certificate"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose output"),
]


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("depbump").setLevel(level)


def _build_settings(
    target: UpdateTarget,
    registry: str,
    timeout: float,
    concurrency: Optional[int],
    insecure: bool,
) -> Settings:
    return Settings(
        registry_url=registry,
        target=target,
        options=RegistryOptions(timeout=timeout, strict_ssl=not insecure),
        concurrency=concurrency,
    )


async def _scan_and_resolve(
    global_: bool,
    selection: DependencySelection,
    settings: Settings,
) -> tuple[BaseScanner, list[DependencyRecord], list[UpdateCandidate]]:
    """Scan dependencies and resolve available updates.

    This is shared logic used by both the check and update commands.

    Args:
        global_: Check global packages instead of the project manifest.
        selection: Dependency classes to include.
        settings: Run configuration.

    Returns:
        Tuple of (scanner, scanned dependencies, sorted update candidates).
        Candidates are empty when no dependencies were found.

    Raises:
        FileNotFoundError: If the manifest (or npm) cannot be found.
        OSError: If npm cannot be run.
        ValueError: If the manifest is unreadable or npm output is invalid.
    """
    scanner = get_scanner(global_=global_, selection=selection)
    records = scanner.scan()
    logger.debug("Scanned %d dependencies from %s", len(records), scanner.source_name)

    if not records:
        return scanner, records, []

    async with UpdateResolver(settings) as resolver:
        candidates = await resolver.resolve_batch(records)

    return scanner, records, candidates


def _check_updates(
    global_: bool,
    selection: DependencySelection,
    settings: Settings,
) -> tuple[BaseScanner, list[UpdateCandidate]]:
    """Run scanning and resolution with progress output.

    Raises:
        typer.Exit: With code 1 on setup errors or when there is nothing to check.
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Checking updates...", total=None)

        try:
            scanner, records, candidates = asyncio.run(
                _scan_and_resolve(global_=global_, selection=selection, settings=settings)
            )
        except FileNotFoundError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(code=1)
        except (OSError, ValueError) as e:
            err_console.print(f"[red]Error reading dependencies:[/red] {e}")
            raise typer.Exit(code=1)

        progress.update(task, completed=True)

    if not records:
        err_console.print("[red]No dependencies found.[/red]")
        raise typer.Exit(code=1)

    console.print(f"Found [bold]{len(records)}[/bold] dependencies")
    return scanner, candidates


@app.command()
def check(
    production: ProductionOption = False,
    development: DevelopmentOption = False,
    optional: OptionalOption = False,
    global_: GlobalOption = False,
    target: TargetOption = UpdateTarget.LATEST,
    registry: RegistryOption = DEFAULT_REGISTRY_URL,
    timeout: TimeoutOption = 30.0,
    concurrency: ConcurrencyOption = None,
    insecure: InsecureOption = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Also write a Markdown report to this file"),
    ] = None,
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            help="Custom Jinja2 template for the Markdown report",
            exists=True,
            readable=True,
        ),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """List dependencies that have a newer version in the registry.

    Exit codes:
        0 - Check completed, with or without updates
        1 - Manifest not found, unreadable, or without dependencies
    """
    _setup_logging(verbose)

    settings = _build_settings(target, registry, timeout, concurrency, insecure)
    selection = DependencySelection(production, development, optional)
    _, candidates = _check_updates(global_, selection, settings)

    if candidates:
        ConsoleReporter(console).print(candidates, settings.target)
    else:
        console.print("[blue]There are no updates available.[/blue]")

    if output:
        reporter = MarkdownReporter(template_path=template)
        try:
            reporter.write(candidates, settings.target, output)
        except OSError as e:
            err_console.print(f"[red]Error writing output:[/red] {e}")
            raise typer.Exit(code=1)
        console.print(f"[green]Generated:[/green] {output}")

    raise typer.Exit(code=0)


@app.command()
def update(
    production: ProductionOption = False,
    development: DevelopmentOption = False,
    optional: OptionalOption = False,
    global_: GlobalOption = False,
    target: TargetOption = UpdateTarget.LATEST,
    registry: RegistryOption = DEFAULT_REGISTRY_URL,
    timeout: TimeoutOption = 30.0,
    concurrency: ConcurrencyOption = None,
    insecure: InsecureOption = False,
    select_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Install every available update without prompting"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Choose available updates and install them.

    Exit codes:
        0 - Updates installed, nothing selected, or already up to date
        1 - Setup error or the package manager failed
    """
    _setup_logging(verbose)

    settings = _build_settings(target, registry, timeout, concurrency, insecure)
    selection = DependencySelection(production, development, optional)
    scanner, candidates = _check_updates(global_, selection, settings)

    if not candidates:
        console.print("[blue]There are no updates available.[/blue]")
        raise typer.Exit(code=0)

    ConsoleReporter(console).print(candidates, settings.target)

    selected = candidates if select_all else select_updates(candidates, console)
    if selected is None:
        console.print("[yellow]No packages were updated.[/yellow]")
        raise typer.Exit(code=0)
    if not selected:
        console.print("[yellow]No packages were selected for update.[/yellow]")
        raise typer.Exit(code=0)

    manager = detect_package_manager(
        manifest_path=scanner.source_path,
        package_manager_field=scanner.package_manager,
        global_=global_,
    )
    cwd = scanner.source_path.parent if scanner.source_path else None

    try:
        install(manager, selected, global_=global_, cwd=cwd)
    except InstallError as e:
        err_console.print(f"[red]Install failed:[/red] {e}")
        raise typer.Exit(code=1)

    console.print("[green]Packages successfully updated![/green]")
    raise typer.Exit(code=0)


if __name__ == "__main__":
    app()
