"""Command line entry point: run the server or one of the polling actors."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from gascontainer.actors import MassDecreaser, MassIncreaser, PollingActor
from gascontainer.client import GasContainerClient
from gascontainer.config import ClientConfig, ServerConfig
from gascontainer.server import run_server

LOG_FORMAT = "%(asctime)s|%(levelname)s| %(message)s"
LOG_DATEFMT = "%H:%M:%S"

_ACTORS: dict[str, type[PollingActor]] = {
    "increaser": MassIncreaser,
    "decreaser": MassDecreaser,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gascontainer", description="Gas container pressure simulator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the container server")
    serve.add_argument("--host", help="Listen address (default: 0.0.0.0)")
    serve.add_argument("--port", type=int, help="Listen port (default: 5000)")
    serve.add_argument("--seed", type=int, help="Seed for the temperature drift")

    for name, actor_cls in _ACTORS.items():
        actor = sub.add_parser(name, help=actor_cls.__doc__)
        actor.add_argument("--base-url", help="Server URL (default: http://localhost:5000)")
        actor.add_argument("--seed", type=int, help="Seed for the random mass amounts")
    return parser


async def _run_actor(name: str, config: ClientConfig) -> None:
    async with GasContainerClient(config) as client:
        await _ACTORS[name](client, config).run()


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    if args.command == "serve":
        overrides: dict[str, Any] = {
            key: getattr(args, key) for key in ("host", "port") if getattr(args, key) is not None
        }
        if args.seed is not None:
            overrides["container"] = {"seed": args.seed}
        run_server(ServerConfig.from_env(**overrides))
        return

    client_overrides: dict[str, Any] = {}
    if args.base_url is not None:
        client_overrides["base_url"] = args.base_url
    if args.seed is not None:
        client_overrides["seed"] = args.seed
    try:
        asyncio.run(_run_actor(args.command, ClientConfig.from_env(**client_overrides)))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
