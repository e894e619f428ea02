"""wavetile - Generate a tile grid from a socket catalog."""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.text import Text

from wavetile.catalog import Catalog, CatalogError, catalog_definition, load_catalog
from wavetile.core.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_SEED,
    DEFAULT_STEP_INTERVAL,
    DEFAULT_WIDTH,
)
from wavetile.core.grid import Grid
from wavetile.core.types import Position
from wavetile.generation import (
    GenerationStatus,
    Model,
    StepRunner,
    init,
    manual_place,
    run_to_completion,
    status,
    to_tiles,
)
from wavetile.logging_config import setup_logging

logger = logging.getLogger("wavetile.main")


def render_tiles(tiles: Grid) -> Text:
    """Render a grid of catalog tiles as colored symbols, one line per row."""
    text = Text()
    for y, row in enumerate(tiles.rows()):
        if y:
            text.append("\n")
        for tile in row:
            text.append(tile.symbol, style=tile.color)
    return text


def _env_int(name: str, default: int) -> int:
    """Read an int from the environment, falling back on a missing or bad value."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer")
        return default


def parse_placement(catalog: Catalog, text: str) -> tuple[Position, int]:
    """Parse a NAME@X,Y placement into (position, tile index).

    Raises:
        ValueError: If the text is malformed or names an unknown tile
    """
    name, sep, coords = text.partition("@")
    parts = coords.split(",")
    if not sep or len(parts) != 2:
        raise ValueError(f"placement must look like NAME@X,Y, got {text!r}")
    try:
        position = Position(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"placement coordinates must be integers, got {text!r}") from None
    try:
        return position, catalog.index_of(name)
    except KeyError:
        raise ValueError(f"unknown tile {name!r} in placement {text!r}") from None


def generate(model: Model, console: Console) -> int:
    """Run to completion and print the grid. Exit code 0 only when solved."""
    model = run_to_completion(model)
    final = status(model)
    console.print(render_tiles(to_tiles(model)))

    if final is GenerationStatus.SOLVED:
        logger.info(f"SOLVED in {model.step_count} steps")
        return 0
    logger.warning(
        f"{final.name} after {model.step_count} steps, unfixed cells shown as the default tile"
    )
    return 1


async def watch(
    catalog: Catalog,
    width: int,
    height: int,
    seed: int,
    interval: float,
    console: Console,
    placements: list[tuple[Position, int]] | None = None,
) -> int:
    """Generate interactively, redrawing after every placement."""
    runner = StepRunner(init(catalog_definition(catalog, width, height, seed)), interval=interval)
    for position, tile_index in placements or []:
        runner.place(position, tile_index)

    def redraw(model) -> None:
        console.clear()
        console.print(render_tiles(to_tiles(model)))

    runner.on_step(redraw)
    steps = await runner.run()

    final = status(runner.model)
    console.clear()
    console.print(render_tiles(to_tiles(runner.model)))
    console.print(f"{final.name.lower()} after {steps} steps")
    return 0 if final is GenerationStatus.SOLVED else 1


def main() -> int:
    """Main entry point for wavetile."""
    # Load environment variables first
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="wavetile - Generate a tile grid from a socket catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wavetile                          # Solve the bundled sand/wall catalog
  wavetile --width 40 --seed 7      # Wider grid, different seed
  wavetile --catalog my_tiles.yaml  # Use a custom catalog
  wavetile --watch                  # Step interactively, redrawing as it goes
  wavetile --place wall@3,4         # Fix a wall tile at (3, 4) before generating

Exit status is 0 when every cell was filled, 1 when the run stalled on a
contradiction, and 2 for a bad catalog or placement.
        """,
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Catalog YAML file (default: bundled sand/wall catalog)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=_env_int("WAVETILE_WIDTH", DEFAULT_WIDTH),
        help=f"Grid width in cells (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=_env_int("WAVETILE_HEIGHT", DEFAULT_HEIGHT),
        help=f"Grid height in cells (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=_env_int("WAVETILE_SEED", DEFAULT_SEED),
        help=f"Random seed (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--place",
        action="append",
        default=[],
        metavar="NAME@X,Y",
        help="Place a named tile before generating (repeatable; later ones are applied first)",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Step interactively with clock-seeded randomness",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_STEP_INTERVAL,
        help=f"Seconds between steps in watch mode (default: {DEFAULT_STEP_INTERVAL})",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=Path("data"),
        help="Data directory for the log file (default: data/)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to console",
    )

    args = parser.parse_args()

    console_level = logging.DEBUG if args.debug else logging.WARNING
    setup_logging(args.data, console_level=console_level)

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")

    try:
        catalog = load_catalog(args.catalog)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        placements = [parse_placement(catalog, text) for text in args.place]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    console = Console()

    if args.watch:
        try:
            return asyncio.run(
                watch(catalog, args.width, args.height, args.seed, args.interval, console, placements)
            )
        except KeyboardInterrupt:
            print("\nStopped.")
            return 130

    model = init(catalog_definition(catalog, args.width, args.height, args.seed))
    for position, tile_index in placements:
        model = manual_place(model, position, tile_index)
    return generate(model, console)


if __name__ == "__main__":
    sys.exit(main())
