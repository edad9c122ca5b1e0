# elrsband/cli/commands.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from elrsband.app.config import MonitorConfig
from elrsband.app.config_loader import ConfigLoader
from elrsband.app.render import StatusText, render_status
from elrsband.app.runner import AppRun, start_run
from elrsband.runtime.state import PacketInfo


# ---------------- Logging ----------------

def configure_file_logging(app_log_path: Path) -> None:
    """
    Add a file handler to the root logger (idempotent).
    Kept in CLI (presentation-layer concern).
    """
    root = logging.getLogger()
    app_log_path.parent.mkdir(parents=True, exist_ok=True)
    target = str(app_log_path.resolve())

    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target:
            return

    fh = logging.FileHandler(app_log_path, encoding="utf-8", delay=True)
    fh.setLevel(logging.INFO)
    fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root.addHandler(fh)

    if root.level > logging.INFO:
        root.setLevel(logging.INFO)


# ---------------- Config ----------------

def load_config(args: argparse.Namespace) -> MonitorConfig:
    cfg = ConfigLoader(args.config).load() if args.config else MonitorConfig()
    return cfg.with_overrides(port=args.port, baudrate=args.baud)


def _start_app_run(args: argparse.Namespace) -> AppRun:
    if args.log_file:
        configure_file_logging(Path(args.log_file))
    return start_run(load_config(args))


# ---------------- Printing ----------------

class ChangePrinter:
    """Print a rendered status line only when its text changes."""

    def __init__(self, *, show_name: bool, show_telem: bool):
        self._show_name = show_name
        self._show_telem = show_telem
        self.last: Optional[str] = None

    def render(self, info: PacketInfo) -> StatusText:
        return render_status(info, show_name=self._show_name, show_telem=self._show_telem)

    def __call__(self, info: PacketInfo) -> None:
        line = self.render(info).as_line()
        if line != self.last:
            print(line, flush=True)
            self.last = line


# ---------------- Commands ----------------

def cmd_watch(args: argparse.Namespace) -> int:
    run = _start_app_run(args)
    cfg = run.controller.config
    printer = ChangePrinter(show_name=cfg.show_name, show_telem=cfg.show_telem)

    with run.controller:
        try:
            run.controller.run(secs=args.secs, on_status=printer)
        except KeyboardInterrupt:
            pass
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    run = _start_app_run(args)
    cfg = run.controller.config
    printer = ChangePrinter(show_name=cfg.show_name, show_telem=cfg.show_telem)

    with run.controller:
        info = run.controller.run(secs=args.timeout, until=lambda i: i.has_value)

    print(printer.render(info).as_line())
    return 0 if info.has_value else 1
