"""Entry point: ``python -m gridspawner``.

Supports two commands:
  - ``python -m gridspawner fill``     → Spawn random entities and print the grid (default)
  - ``python -m gridspawner overlay``  → Print debug-overlay geometry as JSON
"""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING, Sequence

from pydantic import ValidationError

if TYPE_CHECKING:
    from gridspawner.config import GridConfig
    from gridspawner.core.grid import GridContainer

logger = logging.getLogger(__name__)


def _add_grid_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=10)
    parser.add_argument("--height", type=int, default=10)
    parser.add_argument("--cell-size", type=float, default=1.0)
    parser.add_argument("--cell-spacing", type=float, default=0.1)
    parser.add_argument("--origin-x", type=float, default=0.0)
    parser.add_argument("--origin-y", type=float, default=0.0)
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid placement bookkeeping")
    sub = parser.add_subparsers(dest="command")

    # --- Random fill (default) ---
    fill = sub.add_parser("fill", help="Spawn entities into random free cells (default)")
    _add_grid_args(fill)
    fill.add_argument("--seed", type=int, default=42)
    fill.add_argument("--count", type=int, default=10)
    fill.add_argument("--kind", type=str, default="card")
    fill.add_argument("--mode", type=str, default="strict", choices=["strict", "legacy"])
    fill.add_argument("--max-attempts", type=int, default=None)
    fill.add_argument("--json", action="store_true", help="Print a JSON snapshot instead of a map")

    # --- Debug overlay ---
    overlay = sub.add_parser("overlay", help="Print the debug overlay squares as JSON")
    _add_grid_args(overlay)

    return parser


def _config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GridConfig:
    from gridspawner.config import GridConfig

    extra: dict[str, object] = {}
    if args.command == "fill":
        extra = dict(
            seed=args.seed,
            mode=args.mode,
            max_spawn_attempts=args.max_attempts,
            entity_kind=args.kind,
        )
    try:
        return GridConfig(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            cell_spacing=args.cell_spacing,
            origin_x=args.origin_x,
            origin_y=args.origin_y,
            log_level=args.log_level,
            **extra,
        )
    except ValidationError as exc:
        parser.error(f"invalid grid configuration:\n{exc}")


def render_map(grid: GridContainer) -> str:
    """ASCII map, top row first: '.' for a free cell, the kind's initial otherwise."""
    from gridspawner.core.models import Vector2

    rows: list[str] = []
    for y in range(grid.height - 1, -1, -1):
        row: list[str] = []
        for x in range(grid.width):
            occupant = grid.get_at(Vector2(x, y))
            row.append("." if occupant is None else (occupant.kind[:1] or "?"))
        rows.append("".join(row))
    return "\n".join(rows)


def _run_fill(args: argparse.Namespace, config: GridConfig) -> int:
    from gridspawner.core.enums import Domain
    from gridspawner.core.errors import GridFull
    from gridspawner.core.grid import GridContainer
    from gridspawner.core.registry import EntityRegistry
    from gridspawner.core.snapshot import snapshot_grid
    from gridspawner.systems.factory import EntityPrototype, PrototypeFactory
    from gridspawner.systems.rng import DeterministicRNG
    from gridspawner.systems.spawner import RandomPlacer
    from gridspawner.utils.event_log import EventLog

    registry = EntityRegistry()
    event_log = EventLog()
    grid = GridContainer.from_config(config, registry, event_log)
    rng = DeterministicRNG(config.seed)
    placer = RandomPlacer(rng.stream(Domain.PLACEMENT), config.max_spawn_attempts)
    factory = PrototypeFactory(registry, EntityPrototype(kind=config.entity_kind))

    spawned = 0
    for _ in range(args.count):
        try:
            entity = placer.spawn_random(grid, factory)
        except GridFull:
            logger.warning("No empty grid positions! Spawned %d of %d.", spawned, args.count)
            break
        spawned += 1
        logger.info("Spawned %r at %s", entity, grid.cell_of(entity))

    logger.info("Done. %d event(s) recorded, %d/%d cells occupied.",
                len(event_log), grid.occupied_count, config.cell_count)

    if args.json:
        print(snapshot_grid(grid).model_dump_json(indent=2))
    else:
        print(render_map(grid))
    return 0


def _run_overlay(config: GridConfig) -> int:
    from gridspawner.core.grid import GridContainer
    from gridspawner.core.registry import EntityRegistry
    from gridspawner.core.snapshot import snapshot_overlay

    grid = GridContainer.from_config(config, EntityRegistry())
    print(snapshot_overlay(grid).model_dump_json(indent=2))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    from gridspawner.utils.logging import setup_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to fill mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["fill"])

    config = _config_from_args(parser, args)
    setup_logging(config.log_level)

    if args.command == "overlay":
        return _run_overlay(config)
    return _run_fill(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
