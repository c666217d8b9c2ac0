"""Main CLI interface for ZoneManifest using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .. import __version__
from ..classifier import RULES, classify_and_format
from ..config import ConfigManager, ZoneManifestConfig, get_config_manager
from ..manifest import ManifestGenerator, ManifestResult
from ..scanner import ZoneFolderScanner
from ..utils.logging import (
    get_console,
    get_logger,
    print_error,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)

logger = get_logger(__name__)
console = get_console()

DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


@click.group()
@click.version_option(version=__version__, prog_name="ZoneManifest")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx, config: Optional[Path]):
    """
    ZoneManifest - Generate asset manifests for zonetool zone folders.

    Walks a zone folder and writes a <zone>.csv listing every asset as
    "type,path" for the packaging pipeline.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    try:
        config_manager = get_config_manager(config)
        loaded = config_manager.load(create_if_missing=True)
    except ValueError as e:
        print_error(f"Error: {escape(str(e))}")
        sys.exit(1)

    setup_logging(
        level=loaded.logging.level,
        log_dir=loaded.logging.log_dir,
        max_bytes=loaded.logging.max_bytes,
        backup_count=loaded.logging.backup_count,
        console_enabled=loaded.logging.console_enabled,
        file_enabled=loaded.logging.file_enabled,
    )

    ctx.obj["config_manager"] = config_manager
    ctx.obj["config"] = loaded


def _prompt_map_mode() -> bool:
    """Ask which kind of manifest to generate."""
    console.print("[prompt]Select CSV Type:[/prompt]")
    console.print("  [1] Map CSV")
    console.print("  [2] Normal CSV")
    choice = Prompt.ask("Enter number", choices=["1", "2"], show_choices=False)
    return choice == "1"


def _prompt_zone_folder(folders: list[Path]) -> Path:
    """Ask which zone folder to generate the manifest for."""
    console.print("[prompt]Select a folder:[/prompt]")
    for i, folder in enumerate(folders, 1):
        console.print(f"  [{i}] [highlight]{escape(folder.name)}[/highlight]")
    choice = Prompt.ask(
        "Enter number",
        choices=[str(i) for i in range(1, len(folders) + 1)],
        show_choices=False,
    )
    return folders[int(choice) - 1]


def _display_summary(result: ManifestResult):
    """Display the per-type summary of a generated manifest."""
    table = Table(title="Summary of types", show_header=True, header_style="bold cyan")
    table.add_column("Type", style="highlight")
    table.add_column("Count", style="green", justify="right")

    for type_name, count in sorted(result.type_counts.items()):
        table.add_row(type_name, str(count))

    console.print(table)


def _run_generation(
    generator: ManifestGenerator, zone_dir: Path, skip_techsets: bool
) -> ManifestResult:
    """Generate one manifest with a progress bar."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(
            f"[cyan]Generating {generator.output_path_for(zone_dir).name}...", total=None
        )

        def advance(index: int, total: int, line: str):
            progress.update(task, completed=index, total=total)

        return generator.generate(zone_dir, skip_techsets=skip_techsets, progress_callback=advance)


@cli.command()
@click.argument("zone", required=False)
@click.option(
    "--map/--normal",
    "map_mode",
    default=None,
    help="Generate a map manifest (mp_ folders, map files only) or a normal one",
)
@click.option(
    "--zonetool-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Zonetool directory holding the zone folders (overrides config)",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the generated CSV (overrides config)",
)
@click.option(
    "--skip-techsets/--include-techsets",
    default=None,
    help="Leave out the techsets folder (asked when omitted)",
)
@click.option(
    "--no-check-dir",
    is_flag=True,
    help="Do not require the zonetool directory to be named 'zonetool'",
)
@click.pass_context
def generate(
    ctx,
    zone: Optional[str],
    map_mode: Optional[bool],
    zonetool_dir: Optional[Path],
    output_dir: Optional[Path],
    skip_techsets: Optional[bool],
    no_check_dir: bool,
):
    """
    Generate the manifest CSV for a zone folder.

    ZONE is the name of a folder inside the zonetool directory. Anything not
    given on the command line is asked for interactively.

    \b
    Examples:
        zonemanifest generate
        zonemanifest generate mp_crash --map
        zonemanifest generate common --normal --include-techsets
    """
    config: ZoneManifestConfig = ctx.obj["config"]
    interactive = zone is None

    base_dir = Path(zonetool_dir or config.zonetool_dir).resolve()
    out_dir = Path(output_dir or config.output_dir or base_dir)

    if config.enforce_zonetool_dir and not no_check_dir:
        if base_dir.name != config.zonetool_dir_name:
            print_error(
                f"Error: must be run in '{escape(config.zonetool_dir_name)}' "
                f"(current: {escape(str(base_dir))})"
            )
            sys.exit(1)

    scanner = ZoneFolderScanner(map_folder_prefix=config.map_folder_prefix)

    try:
        while True:
            run_map_mode = map_mode if map_mode is not None else _prompt_map_mode()

            if zone is not None:
                zone_dir = base_dir / zone
                if not zone_dir.is_dir():
                    print_error(f"Error: No zone folder '{escape(zone)}' in {escape(str(base_dir))}")
                    sys.exit(1)
            else:
                folders = scanner.find_zone_folders(base_dir, map_mode=run_map_mode)
                if not folders:
                    print_error(
                        f"Error: No matching subdirectories in '{escape(base_dir.name)}'."
                    )
                    sys.exit(1)
                zone_dir = _prompt_zone_folder(folders)

            run_skip_techsets = skip_techsets
            if run_skip_techsets is None:
                run_skip_techsets = scanner.has_techsets(zone_dir) and Confirm.ask(
                    "Skip 'techsets' folder?", default=False
                )
            if run_skip_techsets:
                print_info("Leaving out the 'techsets' folder")

            generator = ManifestGenerator(out_dir, map_mode=run_map_mode, scanner=scanner)
            result = _run_generation(generator, zone_dir, run_skip_techsets)

            if not result.success:
                print_error(f"Error: {escape(result.error_message)}")
                sys.exit(1)

            console.print()
            print_success(
                f"CSV generated: {escape(str(result.output_path))} "
                f"({result.entry_count} entries, {result.skipped} skipped)"
            )
            console.print()
            _display_summary(result)

            if not interactive or not Confirm.ask("\nGenerate another CSV?", default=False):
                break

    except OSError as e:
        print_error(f"Error: {escape(str(e))}")
        logger.exception("Generate command error")
        sys.exit(1)


@cli.command()
@click.argument("base_dir", type=click.Path(file_okay=False, path_type=Path))
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--map", "map_mode", is_flag=True, help="Classify as for a map manifest")
def classify(base_dir: Path, files: tuple[Path, ...], map_mode: bool):
    """
    Print the manifest line for each FILE under BASE_DIR.

    Files do not need to exist; only their paths are classified.
    """
    base = base_dir.resolve()
    failed = False

    for file_path in files:
        try:
            click.echo(classify_and_format(base, file_path.resolve(), map_mode=map_mode))
        except ValueError:
            print_error(f"Error: not under {escape(str(base_dir))}: {escape(str(file_path))}")
            failed = True

    if failed:
        sys.exit(1)


@cli.command()
def rules():
    """Show the classification rules in evaluation order."""
    table = Table(title="Classification Rules", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Folder", style="cyan")
    table.add_column("Pattern", style="magenta")
    table.add_column("Type", style="green")
    table.add_column("Full path", justify="center")

    for i, rule in enumerate(RULES, 1):
        table.add_row(
            str(i),
            f"{rule.folder}/",
            escape(rule.extension_pattern.pattern),
            rule.type,
            "✓" if rule.force_full_path else "",
        )

    console.print(table)


@cli.command()
@click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration file")
def init(config_path: Path, force: bool):
    """Create a default configuration file."""
    if config_path.exists() and not force:
        print_warning(
            f"Configuration already exists: {escape(str(config_path))} "
            "(use --force to overwrite)"
        )
        return

    try:
        ConfigManager().save(ZoneManifestConfig(), config_path)
        print_success(f"Created default configuration: {escape(str(config_path))}")
    except OSError as e:
        print_error(f"Error: {escape(str(e))}")
        logger.exception("Init command error")
        sys.exit(1)


@cli.group(name="config")
def config_group():
    """Manage ZoneManifest configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    config: ZoneManifestConfig = ctx.obj["config"]
    config_manager = ctx.obj["config_manager"]

    console.print("\n[bold cyan]ZoneManifest Configuration[/bold cyan]\n")

    console.print("[bold]Zonetool:[/bold]")
    console.print(f"  Directory: {config.zonetool_dir}")
    console.print(f"  Required Name: {config.zonetool_dir_name}")
    console.print(
        f"  Name Check: {'[green]Enabled[/green]' if config.enforce_zonetool_dir else '[yellow]Disabled[/yellow]'}"
    )
    console.print(f"  Map Folder Prefix: {config.map_folder_prefix}")

    console.print("\n[bold]Output:[/bold]")
    console.print(f"  Directory: {config.get_output_dir()}")

    console.print("\n[bold]Logging:[/bold]")
    console.print(f"  Level: {config.logging.level}")
    console.print(f"  Log Dir: {config.logging.log_dir}")
    console.print(f"  File Logging: {config.logging.file_enabled}")

    console.print(f"\n[dim]Config file: {config_manager.config_path or '(defaults)'}[/dim]")


if __name__ == "__main__":
    cli()
