from __future__ import annotations

import logging

import pytest

from elrsband.cli.args import parse_args
from elrsband.cli.commands import configure_file_logging
from elrsband.cli.main import main


def test_parse_watch_flags():
    args = parse_args(["watch", "--port", "/dev/ttyUSB0", "--baud", "0x1C200", "--secs", "2.5"])
    assert args.cmd == "watch"
    assert args.port == "/dev/ttyUSB0"
    assert args.baud == 115200
    assert args.secs == 2.5
    assert args.config is None


def test_parse_status_default_timeout():
    args = parse_args(["status"])
    assert args.timeout == 10.0
    assert args.port is None


def test_bad_baud_exits():
    with pytest.raises(SystemExit):
        parse_args(["status", "--baud", "fast"])


def test_status_without_port_reports_crsf_unavailable(capsys):
    rc = main(["status", "--timeout", "0"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "CRSF unavailable" in out


def test_watch_prints_once_per_change(capsys):
    rc = main(["watch", "--secs", "0"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out == ["CRSF unavailable"]


def test_missing_config_prints_error_and_hint(tmp_path, capsys):
    rc = main(["status", "--config", str(tmp_path / "nope.yml"), "--timeout", "0"])
    out = capsys.readouterr().out
    assert rc == 1
    assert out.startswith("ERROR: Missing config file")
    assert "Hint: " in out


def test_configure_file_logging_is_idempotent(tmp_path):
    root = logging.getLogger()
    before = list(root.handlers)
    path = tmp_path / "logs" / "app.log"
    try:
        configure_file_logging(path)
        configure_file_logging(path)
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert isinstance(added[0], logging.FileHandler)
    finally:
        for h in root.handlers[:]:
            if h not in before:
                root.removeHandler(h)
                h.close()
