"""CLI interface for Tidytree."""

from __future__ import annotations

import json
import logging

import click

from tidytree.core.engine import RootReport, TidyEngine
from tidytree.models.action_result import ActionResult
from tidytree.models.options import Options
from tidytree.settings import Settings
from tidytree.utils import format_elapsed, format_megapixels

log = logging.getLogger(__name__)

_MOVE_HEADINGS = {
    "move:_images": ("Image Directories", "No Image Directories"),
    "move:_videos": ("Video Directories", "No Video Directories"),
    "move:_mixed": ("Mixed Directories", "No Mixed Directories"),
}


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _build_options(categorize: bool, delete: bool, orphans: bool, sizes: bool, verbose: int) -> Options:
    settings = Settings()
    return Options(
        categorize=categorize,
        delete=delete,
        orphans=orphans,
        sizes=sizes,
        verbose=verbose > 0,
        image_extensions=settings.image_extensions(),
        video_extensions=settings.video_extensions(),
    )


@click.command()
@click.argument("roots", nargs=-1, type=click.Path())
@click.option("-c", "--categorize", is_flag=True, help="Move image, video and mixed leaves under _images/_videos/_mixed")
@click.option("-d", "--delete", is_flag=True, help="Delete empty directories and .DS_Store files")
@click.option("-o", "--orphans", is_flag=True, help="Report directories holding a single file")
@click.option(
    "-s",
    "--sizes",
    is_flag=True,
    help=(
        "Report average image size per directory. SVG files and images over "
        "Pillow's decompression-bomb limit (about 179 megapixels) are skipped"
    ),
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def main(
    roots: tuple[str, ...],
    categorize: bool,
    delete: bool,
    orphans: bool,
    sizes: bool,
    verbose: int,
    as_json: bool,
) -> None:
    """Tidytree: audit and reorganize leaf directories.

    Each ROOT is scanned for leaf directories, which are classified as
    empty, orphaned, images, videos, mixed or other.
    """
    _setup_logging(verbose)
    options = _build_options(categorize, delete, orphans, sizes, verbose)
    log.info("options: %s", options)

    if not roots:
        click.echo("No directories given.")
        return

    engine = TidyEngine(options)

    if as_json:
        reports = engine.run(roots)
        click.echo(json.dumps([r.to_dict() for r in reports], indent=2))
        return

    engine.run(roots, on_report=lambda report: _print_report(report, options))


def _print_report(report: RootReport, options: Options) -> None:
    click.echo(f"\nStarting at {click.style(str(report.root), bold=True)}\n")
    if report.error:
        click.echo(f"  {click.style('✗', fg='red')} {report.error}")
        return

    result = report.result
    if result.empties:
        click.echo(f"\n{'Deleting' if options.delete else 'Empties'}:")
        for path in result.empties:
            click.echo(str(path))
    else:
        click.echo("\nNo empty directories")

    if options.orphans:
        if result.orphans:
            click.echo("\nOrphans:")
            for path in result.orphans:
                click.echo(str(path))
        else:
            click.echo("\nNo orphaned files")

    if options.sizes:
        for entry in result.sorted_sizes():
            click.echo(f"{format_megapixels(entry.size)}\t{entry.path}")

    if options.categorize and options.verbose:
        for move in report.moves:
            _print_moves(move)
        if result.others:
            click.echo("\nOther Directories:")
            for path in result.others:
                click.echo(str(path))

    errors = report.error_count
    if errors:
        click.echo(f"\n{click.style('!', fg='yellow')} {errors} error(s), see log output above")
    if options.verbose:
        click.echo(f"\nDone in {format_elapsed(report.elapsed)}")


def _print_moves(move: ActionResult) -> None:
    heading, nothing = _MOVE_HEADINGS.get(move.action, (move.action, f"No {move.action}"))
    if not (move.done or move.skipped or move.errors):
        click.echo(f"\n{nothing}")
        return
    click.echo(f"\n{heading}:")
    for src, dst in zip(move.done, move.targets):
        click.echo(f"{src} -> {dst}")
    for path in move.skipped:
        click.echo(f"{path} (already organized)")
    for error in move.errors:
        click.echo(f"{click.style('!', fg='yellow')} {error}")


if __name__ == "__main__":
    main()
