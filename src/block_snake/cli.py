"""CLI launcher for Block Snake."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys

from block_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument("--tick-ms", type=int, default=None)
    parser.add_argument(
        "--direction", type=str, default=None,
        choices=["up", "down", "left", "right"],
    )
    parser.add_argument("--seed", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="block-snake",
        description="Browser-rendered Snake served over a WebSocket.",
    )
    parser.add_argument("--log-level", type=str, default="info")
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Serve the game page.")
    _add_config_flags(serve_p)
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a headless game from a list of key presses.",
    )
    _add_config_flags(sim_p)
    sim_p.add_argument(
        "--keys", type=str, default="ArrowRight",
        help="Comma-separated key names; key i is pressed before tick i.",
    )
    sim_p.add_argument("--max-ticks", type=int, default=100)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "rows": "rows",
        "cols": "cols",
        "tick_ms": "tick_period_ms",
        "direction": "initial_direction",
        "seed": "seed",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name, None) is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from block_snake.server.app import create_app

    config = _load_config(args)
    logger.info(
        "Serving %d×%d board on http://%s:%d/",
        config.rows, config.cols, args.host, args.port,
    )
    uvicorn.run(
        create_app(config),
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )
    return 0


async def simulate(
    config: GameConfig, keys: list[str], max_ticks: int,
) -> dict:
    """Drive a session tick by tick without sleeping."""
    from block_snake.render import RecordingRenderer
    from block_snake.session import GameSession

    renderer = RecordingRenderer()
    session = GameSession(config, renderer, scheduled=False)
    for i in range(max_ticks):
        if i < len(keys):
            await session.handle_key(keys[i])
        if not session.clock.running:
            break
        await session.clock.on_tick()
    await session.close()

    engine = session.engine
    return {
        "ticks": engine.tick,
        "length": len(engine.snake),
        "state": session.clock.state.value,
        "cause": renderer.causes[0] if renderer.causes else None,
    }


def _run_simulate(args: argparse.Namespace) -> int:
    config = _load_config(args)
    keys = [k.strip() for k in args.keys.split(",") if k.strip()]
    result = asyncio.run(simulate(config, keys, args.max_ticks))
    print(  # noqa: T201
        f"ticks={result['ticks']} length={result['length']} "
        f"state={result['state']} cause={result['cause'] or '-'}",
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``block-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
