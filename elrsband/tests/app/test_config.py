from __future__ import annotations

import textwrap

import pytest

from elrsband.app.config import MonitorConfig
from elrsband.app.config_loader import ConfigLoader
from elrsband.core.errors import ConfigError


def _write(tmp_path, text: str):
    p = tmp_path / "elrsband.yml"
    p.write_text(textwrap.dedent(text), encoding="utf-8")
    return p


def test_empty_file_yields_defaults(tmp_path):
    cfg = ConfigLoader(_write(tmp_path, "")).load()
    assert cfg == MonitorConfig()
    assert cfg.device_id == 0xEE
    assert cfg.timings.stale_after == 350
    assert cfg.show_name is True and cfg.show_telem is True
    assert cfg.link.port is None
    assert cfg.link.baudrate == 400000
    assert cfg.link.tick_s == 0.01
    assert cfg.link.tick_interval_s == 0.02


def test_full_file(tmp_path):
    p = _write(
        tmp_path,
        """
        device_id: 0xEE
        timings:
          refresh_interval: 60
          stale_after: 200
        display:
          show_name: false
        link:
          port: /dev/ttyUSB0
          baudrate: 921600
          tick_interval_s: 0.05
        """,
    )
    cfg = ConfigLoader(p).load()

    assert cfg.device_id == 0xEE
    assert cfg.timings.refresh_interval == 60
    assert cfg.timings.stale_after == 200
    assert cfg.timings.scan_spacing == 15
    assert cfg.show_name is False
    assert cfg.show_telem is True
    assert cfg.link.port == "/dev/ttyUSB0"
    assert cfg.link.baudrate == 921600
    assert cfg.link.tick_interval_s == 0.05


def test_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError) as ei:
        ConfigLoader(tmp_path / "absent.yml").load()
    assert ei.value.code == "config_error"
    assert ei.value.hint


def test_invalid_yaml_raises_config_error(tmp_path):
    p = _write(tmp_path, "timings: [unclosed\n")
    with pytest.raises(ConfigError):
        ConfigLoader(p).load()


def test_non_mapping_root_rejected(tmp_path):
    with pytest.raises(ConfigError):
        ConfigLoader(_write(tmp_path, "- a\n- b\n")).load()


@pytest.mark.parametrize(
    "data",
    [
        {"bogus": 1},
        {"timings": {"stale": 1}},
        {"timings": {"stale_after": -1}},
        {"timings": {"stale_after": "soon"}},
        {"timings": [1, 2]},
        {"device_id": 300},
        {"device_id": True},
        {"display": {"show_name": "yes"}},
        {"link": {"baudrate": 0}},
        {"link": {"tick_s": 0}},
        {"link": {"speed": 1}},
    ],
)
def test_from_mapping_rejects_bad_values(data):
    with pytest.raises(ConfigError):
        MonitorConfig.from_mapping(data)


def test_overrides_replace_link_values():
    cfg = MonitorConfig.from_mapping({"link": {"port": "COM3"}})
    out = cfg.with_overrides(port="/dev/ttyACM0", baudrate=115200)

    assert out.link.port == "/dev/ttyACM0"
    assert out.link.baudrate == 115200
    assert cfg.link.port == "COM3"


def test_overrides_none_keeps_values():
    cfg = MonitorConfig.from_mapping({"link": {"port": "COM3", "baudrate": 9600}})
    assert cfg.with_overrides() == cfg
