"""CLI interface for pyfsync."""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import click

from . import api
from .cli_progress import SyncProgressDisplay
from .config import config
from .exceptions import FsyncError
from .output import OutputFormatter
from .tree.config import load_sync_pairs_from_json
from .tree.engine import ProgressCallback
from .tree.stats import SyncStats

logger = logging.getLogger(__name__)


@click.group()
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--json", is_flag=True, help="Output in JSON format")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose/debug logging output",
)
@click.version_option(package_name="pyfsync")
@click.pass_context
def main(ctx: Any, quiet: bool, json: bool, verbose: bool) -> None:
    """pyfsync - Keep a destination file or directory in sync with a source."""
    ctx.ensure_object(dict)
    ctx.obj["out"] = OutputFormatter(json_output=json, quiet=quiet)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("pyfsync").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


def _run_with_progress(
    out: OutputFormatter,
    no_progress: bool,
    run: Callable[[Optional[ProgressCallback]], SyncStats],
) -> SyncStats:
    """Run a sync, showing a spinner unless output is quiet or JSON."""
    if no_progress or out.quiet or out.json_output:
        return run(None)

    with SyncProgressDisplay() as display:
        return run(display.create_callback())


def _display_summary(out: OutputFormatter, stats: SyncStats) -> None:
    out.print_summary("Sync summary", stats.to_dict())
    if stats.changed:
        out.success(
            f"Sync complete: {stats.files_copied} file(s) copied "
            f"({out.format_size(stats.bytes_copied)})"
        )
    else:
        out.success("Already up to date")


@main.command()
@click.argument("destination", type=click.Path(path_type=Path))
@click.argument("source", type=click.Path(path_type=Path))
@click.option(
    "--delete",
    "-d",
    is_flag=True,
    help="Delete files in DESTINATION that do not exist in SOURCE",
)
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=None,
    help="Buffer size in bytes for comparing files",
)
@click.option("--no-progress", is_flag=True, help="Disable the progress display")
@click.pass_context
def sync(
    ctx: Any,
    destination: Path,
    source: Path,
    delete: bool,
    chunk_size: Optional[int],
    no_progress: bool,
) -> None:
    """Make DESTINATION a copy of SOURCE.

    Only new or changed files are copied, and permission bits are copied
    from SOURCE. Refuses to replace a non-empty directory with a file.

    Examples:
        pyfsync sync ~/backup/docs ~/docs          # Copy new and changed files
        pyfsync sync -d ~/backup/docs ~/docs       # Also delete extra files
    """
    out: OutputFormatter = ctx.obj["out"]

    out.info(f"Syncing: {destination} <- {source}")
    if delete:
        out.info("Deletion mode: extra files in destination will be removed")

    try:
        stats = _run_with_progress(
            out,
            no_progress,
            lambda callback: api.synchronize(
                destination,
                source,
                delete,
                chunk_size=chunk_size,
                progress_callback=callback,
            ),
        )
    except FsyncError as e:
        logger.debug("Sync failed", exc_info=True)
        out.error(str(e))
        ctx.exit(1)
        return

    _display_summary(out, stats)


@main.command("sync-to")
@click.argument("target_dir", type=click.Path(path_type=Path))
@click.argument("sources", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "--delete",
    "-d",
    is_flag=True,
    help="Delete files in each destination that do not exist in its source",
)
@click.option("--no-progress", is_flag=True, help="Disable the progress display")
@click.pass_context
def sync_to(
    ctx: Any,
    target_dir: Path,
    sources: tuple[Path, ...],
    delete: bool,
    no_progress: bool,
) -> None:
    """Sync each SOURCE into TARGET_DIR.

    Each SOURCE is synced to TARGET_DIR/<name of SOURCE>. Stops at the
    first source that fails.

    Examples:
        pyfsync sync-to ~/backup ~/docs ~/pics     # ~/backup/docs, ~/backup/pics
    """
    out: OutputFormatter = ctx.obj["out"]

    out.info(f"Syncing {len(sources)} source(s) into {target_dir}")

    try:
        stats = _run_with_progress(
            out,
            no_progress,
            lambda callback: api.sync_to(
                target_dir,
                *sources,
                delete_extraneous=delete,
                progress_callback=callback,
            ),
        )
    except FsyncError as e:
        logger.debug("Sync failed", exc_info=True)
        out.error(str(e))
        ctx.exit(1)
        return

    _display_summary(out, stats)


@main.command()
@click.argument(
    "pairs_file", required=False, type=click.Path(path_type=Path), default=None
)
@click.option("--no-progress", is_flag=True, help="Disable the progress display")
@click.pass_context
def run(ctx: Any, pairs_file: Optional[Path], no_progress: bool) -> None:
    """Sync every pair listed in a JSON file.

    PAIRS_FILE defaults to $PYFSYNC_PAIRS_FILE or
    ~/.config/pyfsync/pairs.json. Each entry looks like:

        {"destination": "/backup/docs", "source": "~/docs", "delete": true}
    """
    out: OutputFormatter = ctx.obj["out"]

    try:
        pairs = load_sync_pairs_from_json(pairs_file or config.get_pairs_file())
    except FsyncError as e:
        logger.debug("Sync failed", exc_info=True)
        out.error(str(e))
        ctx.exit(1)
        return

    if not pairs:
        out.warning("No sync pairs configured")
        return

    total = SyncStats()
    for pair in pairs:
        out.info(f"Syncing: {pair}")
        try:
            stats = _run_with_progress(
                out,
                no_progress,
                lambda callback, pair=pair: api.sync_pair(
                    pair, progress_callback=callback
                ),
            )
        except FsyncError as e:
            out.error(f"{pair}: {e}")
            ctx.exit(1)
            return
        total.merge(stats)

    _display_summary(out, total)


if __name__ == "__main__":
    main()
