"""Command-line interface for the gauge simulator.

This thin wrapper parses CLI options, folds them into
:class:`gaugesim.config.Settings` and delegates to
:mod:`gaugesim.runtime`. Every option is optional: without flags the
simulator auto-discovers the first serial port at 115200 baud.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from .config import Settings
from .runtime import main as _main


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gauge-sim", description="Serial gauge display controller simulator"
    )
    parser.add_argument(
        "-p",
        "--port",
        metavar="DEVICE",
        default=None,
        help="Serial device to open (default: first enumerated port)",
    )
    parser.add_argument(
        "--max-attempts",
        metavar="N",
        type=int,
        default=None,
        help="Give up after N failed port acquisitions (default: retry forever)",
    )
    parser.add_argument(
        "--logdir",
        metavar="PATH",
        default=None,
        help="Also write gauge-sim.log into PATH",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every inbound and outbound message",
    )
    return parser


def build_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    cfg = base if base is not None else Settings()

    serial_update: dict[str, object] = {}
    if args.port:
        serial_update["port"] = args.port

    reconnect_update: dict[str, object] = {}
    if args.max_attempts is not None:
        if args.max_attempts < 1:
            raise ValueError("--max-attempts must be at least 1")
        reconnect_update["max_attempts"] = args.max_attempts

    logging_update: dict[str, object] = {}
    if args.debug:
        logging_update["debug"] = True
    if args.logdir:
        logging_update["logdir"] = args.logdir

    return cfg.model_copy(
        update={
            "serial": cfg.serial.model_copy(update=serial_update),
            "reconnect": cfg.reconnect.model_copy(update=reconnect_update),
            "logging": cfg.logging.model_copy(update=logging_update),
        }
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point used by the ``gauge-sim`` script."""

    parser = _build_arg_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        cfg = build_settings(args)
    except ValueError as exc:
        parser.error(str(exc))
    result = _main(cfg)
    return int(result) if result is not None else 0
