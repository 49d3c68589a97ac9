"""Command-line entry point: ``python -m pyswapi``.

Starts the demo web server, or with ``--once`` runs the demo a single
time on the console and exits.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from pyswapi.client import SwapiClient
from pyswapi.config import SwapiConfig, parse_timeout_ms
from pyswapi.demo import DemoOrchestrator

LOG = logging.getLogger("pyswapi")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyswapi", description="Star Wars API demo server")
    parser.add_argument("--no-debug", action="store_true", help="Disable verbose logging")
    parser.add_argument(
        "--timeout",
        nargs="?",
        default=None,
        metavar="MS",
        help="Request timeout in milliseconds (ignored if not an integer)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Disable TLS certificate validation for outbound requests",
    )
    parser.add_argument("--once", action="store_true", help="Run the demo once on the console and exit")
    return parser


def config_from_args(args: argparse.Namespace) -> SwapiConfig:
    overrides: dict[str, object] = {}
    if args.no_debug:
        overrides["debug"] = False
    if args.insecure:
        overrides["verify_ssl"] = False
    if args.timeout is not None:
        timeout = parse_timeout_ms(args.timeout)
        if timeout is None:
            LOG.warning("Ignoring invalid --timeout value %r", args.timeout)
        else:
            overrides["timeout_ms"] = timeout
    return SwapiConfig.from_env(**overrides)


async def run_once(config: SwapiConfig) -> int:
    async with SwapiClient(config) as client:
        report = await DemoOrchestrator(client).run()
    return 0 if report.ok else 1


def serve(config: SwapiConfig) -> None:
    import uvicorn

    from pyswapi.server import create_app

    print(f"Server running at http://localhost:{config.port}/")
    print("Open the URL in your browser and click the button to fetch Star Wars data")
    LOG.debug("Debug mode: ON")
    LOG.debug("Timeout: %d ms", config.timeout_ms)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level="info")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config = config_from_args(args)
    LOG.setLevel(logging.DEBUG if config.debug else logging.INFO)

    if args.once:
        return asyncio.run(run_once(config))

    serve(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
