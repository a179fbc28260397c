"""Entry point: ``python -m geocoin``.

Supports two modes:
  - ``python -m geocoin``         → Launch the FastAPI server for the map client
  - ``python -m geocoin cli``     → Headless session driven by a command list
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_TRANSFERS = ("collect", "deposit")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geocoin Carrier game core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=0)
    srv.add_argument("--radius", type=int, default=8)
    srv.add_argument("--probability", type=float, default=0.1)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless session")
    cli.add_argument("--seed", type=int, default=0)
    cli.add_argument("--radius", type=int, default=8)
    cli.add_argument("--probability", type=float, default=0.1)
    cli.add_argument(
        "--commands", type=str, default="",
        help="Comma list of north|south|east|west|n|s|e|w|collect|deposit",
    )
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from geocoin.api.app import create_app
    from geocoin.config import GameConfig

    config = GameConfig(
        world_seed=args.seed,
        neighborhood_radius=args.radius,
        spawn_probability=args.probability,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def run_commands(session, commands: list[str]) -> None:
    """Apply each command to *session*; transfers act on the player's cell."""
    from geocoin.core.enums import Direction
    from geocoin.core.errors import UnknownCacheError

    for raw in commands:
        cmd = raw.strip().lower()
        if not cmd:
            continue
        if cmd in _TRANSFERS:
            cell = session.get_snapshot().player_cell
            try:
                result, _ = session.collect(cell) if cmd == "collect" else session.deposit(cell)
            except UnknownCacheError as exc:
                logger.error("%s failed: %s", cmd, exc)
                continue
            logger.info("%s at %s -> %s %s", cmd, cell, result.outcome.name, result.coin or "")
        else:
            move = session.move(Direction.parse(cmd))
            logger.info("moved to %s, %d new caches", move.cell, len(move.spawned))


def _run_cli(args: argparse.Namespace) -> None:
    from geocoin.config import GameConfig
    from geocoin.engine.session import GameSession
    from geocoin.utils.logging import setup_logging
    from geocoin.utils.render import render_inventory, render_neighborhood

    config = GameConfig(
        world_seed=args.seed,
        neighborhood_radius=args.radius,
        spawn_probability=args.probability,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    session = GameSession(config)
    run_commands(session, args.commands.split(","))

    snap = session.get_snapshot()
    print(render_neighborhood(snap, config.neighborhood_radius))
    print(render_inventory(snap))
    logger.info("Done. %d caches, %d coins in play.", len(snap.caches), snap.total_coins)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
