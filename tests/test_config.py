"""Tests for MirrorConfig defaults and validation."""

import dataclasses

import pytest

from expander_mirror.config import MirrorConfig


def test_defaults() -> None:
    config = MirrorConfig()
    assert config.device == "/dev/i2c-0"
    assert config.address == 0x20
    assert config.limit == 10
    assert config.delay_s == pytest.approx(0.2)
    assert config.log_dir is None


def test_frozen() -> None:
    config = MirrorConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.limit = 3


@pytest.mark.parametrize("kwargs", [
    {"address": 0x02},
    {"address": 0x78},
    {"limit": 0},
    {"delay_s": -0.1},
    {"device": ""},
])
def test_invalid(kwargs) -> None:
    with pytest.raises(ValueError):
        MirrorConfig(**kwargs)


def test_edge_addresses_accepted() -> None:
    assert MirrorConfig(address=0x03).address == 0x03
    assert MirrorConfig(address=0x77).address == 0x77
