# elrsband/cli/main.py
from __future__ import annotations

from typing import Optional

from elrsband.core.errors import ElrsBandError

from elrsband.cli.args import parse_args
from elrsband.cli.commands import cmd_status, cmd_watch


def main(argv: Optional[list[str]] = None) -> int:
    try:
        args = parse_args(argv)

        if args.cmd == "watch":
            return cmd_watch(args)
        if args.cmd == "status":
            return cmd_status(args)

        return 2
    except ElrsBandError as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
