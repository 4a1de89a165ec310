"""Command-line access to the loaded toolchain configuration."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from chain_config.config import LOG_FORMAT, LOG_FORMATS, LOG_LEVEL, ToolchainConfig, load_config
from chain_config.networks import ConfigError, find_problems, get_network

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_CONFIG_ERROR = 2


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("network", "problem", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> None:
    handler = logging.StreamHandler(sys.stderr)
    if fmt.lower() == "json":
        handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), handlers=[handler], force=True)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chain-config", description="Inspect the toolchain configuration.")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL, metavar="<level>",
                        help="Log level (default: %(default)s)")
    parser.add_argument("--log-format", type=str, choices=LOG_FORMATS, default=LOG_FORMAT,
                        help="Log format (default: %(default)s)")
    parser.add_argument("--no-dotenv", action="store_true",
                        help="Do not load a .env file before reading the environment")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Print the configuration as JSON.")
    show_parser.add_argument("-n", "--network", type=str, metavar="<name>",
                             help="Print only this network")
    show_parser.add_argument("--indent", type=int, default=2, metavar="<n>",
                             help="JSON indentation (default: %(default)s)")

    check_parser = subparsers.add_parser("check", help="Report unset endpoint values.")
    check_parser.add_argument("-n", "--network", type=str, metavar="<name>",
                              help="Check only this network")
    return parser


def _show(config: ToolchainConfig, args: argparse.Namespace) -> int:
    if args.network is not None:
        payload = get_network(config, args.network).to_dict()
    else:
        payload = config.to_dict()
    print(json.dumps(payload, indent=args.indent, sort_keys=True))
    return EXIT_OK


def _check(config: ToolchainConfig, args: argparse.Namespace) -> int:
    problems = find_problems(config, args.network)
    for problem in problems:
        logger.warning("problem=%s", problem, extra={"network": args.network, "problem": problem})
    if problems:
        return EXIT_PROBLEMS
    logger.info("configuration ok", extra={"network": args.network})
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)
    config = load_config(dotenv=not args.no_dotenv)
    handlers = {"show": _show, "check": _check}
    try:
        return handlers[args.command](config, args)
    except ConfigError as exc:
        logger.error("error=%s", exc, extra={"error": exc.code})
        return EXIT_CONFIG_ERROR
