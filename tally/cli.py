"""tally.cli

Command line interface entry point for tally.

Design constraints:
- argparse-based.
- Lazy imports: do not import the web stack at parse time.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CliContext:
    repo_root: Path


def _repo_root_from_cwd() -> Path:
    return Path.cwd()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tally",
        description="Named in-memory counters over HTTP.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit.",
    )

    sub = parser.add_subparsers(dest="command")

    p_api = sub.add_parser("api", help="Start the HTTP server")
    p_api.add_argument("--host", default=None)
    p_api.add_argument("--port", type=int, default=None)
    p_api.add_argument("--config", type=Path, default=None, help="Path to a YAML config file.")

    p_status = sub.add_parser("status", help="Print resolved configuration")
    p_status.add_argument("--config", type=Path, default=None, help="Path to a YAML config file.")

    return parser


def _print_version() -> None:
    from tally import __version__

    print(f"tally v{__version__}")


def _resolve_config(ctx: CliContext, args: argparse.Namespace):
    from tally.core.config import Config, load_config

    if args.config is not None:
        return Config.from_yaml(args.config), args.config
    return load_config(ctx.repo_root)


def _cmd_api(ctx: CliContext, args: argparse.Namespace) -> int:
    from tally.core.exceptions import ConfigError

    try:
        config, _ = _resolve_config(ctx, args)
    except ConfigError as e:
        print(f"config error: {e}", file=sys.stderr)
        return 1

    host = args.host or config.api.host
    port = args.port if args.port is not None else config.api.port

    from api.main import create_app
    from tally.core.log import configure_logging

    configure_logging(config.logging)

    import uvicorn

    # uvicorn logs bind failures and exits with status 1 on its own.
    # log_config=None leaves uvicorn loggers propagating to the root handler set up above.
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_level=config.logging.level.lower(),
        log_config=None,
    )
    return 0


def _cmd_status(ctx: CliContext, args: argparse.Namespace) -> int:
    from tally import __version__
    from tally.core.exceptions import ConfigError

    try:
        config, source = _resolve_config(ctx, args)
    except ConfigError as e:
        print(f"config error: {e}", file=sys.stderr)
        return 1

    print("tally status")
    print(f"- version: {__version__}")
    print(f"- config: {source if source is not None else 'built-in defaults'}")
    print(f"- listen: {config.api.host}:{config.api.port}")
    print(f"- cors origins: {', '.join(config.cors.allow_origins) or 'disabled'}")
    print(f"- log level: {config.logging.level}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        _print_version()
        return 0

    if not args.command:
        parser.print_help()
        return 2

    ctx = CliContext(repo_root=_repo_root_from_cwd())

    dispatch: dict[str, Callable[[CliContext, argparse.Namespace], int]] = {
        "api": _cmd_api,
        "status": _cmd_status,
    }

    fn = dispatch.get(str(args.command))
    if fn is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 2

    return int(fn(ctx, args))


if __name__ == "__main__":
    raise SystemExit(main())
