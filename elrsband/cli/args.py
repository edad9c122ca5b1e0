# elrsband/cli/args.py
from __future__ import annotations

import argparse
from typing import Optional


def _int_auto(value: str) -> int:
    """Accept decimal or 0x-prefixed integers."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer '{value}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="elrsband")
    sub = parser.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--port", default=None, help="Serial port of the CRSF module (e.g. /dev/ttyUSB0).")
    common.add_argument("--baud", type=_int_auto, default=None, help="Baud rate (default 400000).")
    common.add_argument("--config", default=None, help="YAML config file.")
    common.add_argument("--log-file", default=None, help="Append INFO+ logs to this file.")

    pw = sub.add_parser("watch", parents=[common], help="Print the packet rate whenever it changes.")
    pw.add_argument("--secs", type=float, default=None, help="Stop after this many seconds.")

    ps = sub.add_parser("status", parents=[common], help="Wait for a reading and print it once.")
    ps.add_argument("--timeout", type=float, default=10.0, help="Give up after this many seconds.")

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
