"""Shared fixtures: a simulated MCP23017 behind the I2CDevice interface."""

from typing import Iterable, List, Optional

import pytest

from expander_mirror import registers as R
from expander_mirror.errors import DeviceAccessError, DeviceOpenError

NUM_REGISTERS = 0x16


class FakeExpander:
    """MCP23017 in BANK=0 sequential mode, driven by a scripted list of pin levels.

    Each read of GPIOA consumes the next raw pin level from `pin_levels`
    and reports it through IPOLA. Running out of script raises
    `exhausted_exc` so a test can never spin forever.
    """

    def __init__(self, pin_levels: Iterable[int] = (), exhausted_exc: BaseException = None):
        self.pin_levels: List[int] = list(pin_levels)
        self.exhausted_exc = exhausted_exc or AssertionError("pin level script exhausted")
        # power-on reset: all inputs, everything else zero
        self.regs = [0x00] * NUM_REGISTERS
        self.regs[R.IODIRA] = 0xFF
        self.regs[R.IODIRB] = 0xFF
        self.pointer = 0

        self.opened = False
        self.bound = False
        self.closed = False
        self.writes: List[bytes] = []
        self.port_b_values: List[int] = []

        self.fail_open = False
        self.fail_bind = False
        self.short_write_at: Optional[int] = None   # index into writes
        self.short_read = False

    # interface used by PortMirror
    def open(self) -> None:
        if self.fail_open:
            raise DeviceOpenError("no such device")
        self.opened = True

    def bind(self) -> None:
        if self.fail_bind:
            raise DeviceAccessError("no ACK")
        self.bound = True

    def close(self) -> None:
        self.closed = True

    def write(self, data: bytes) -> int:
        index = len(self.writes)
        self.writes.append(bytes(data))
        if self.short_write_at == index:
            return len(data) - 1
        self.pointer = data[0]
        for value in data[1:]:
            self._store(self.pointer, value)
            self.pointer = (self.pointer + 1) % NUM_REGISTERS
        return len(data)

    def read(self, length: int) -> bytes:
        if self.short_read:
            return b""
        out = []
        for _ in range(length):
            out.append(self._load(self.pointer))
            self.pointer = (self.pointer + 1) % NUM_REGISTERS
        return bytes(out)

    # register model
    def _store(self, reg: int, value: int) -> None:
        if reg == R.GPIOA:
            reg = R.OLATA
        elif reg == R.GPIOB:
            reg = R.OLATB
            self.port_b_values.append(value)
        self.regs[reg] = value & 0xFF

    def _load(self, reg: int) -> int:
        if reg == R.GPIOA:
            if not self.pin_levels:
                raise self.exhausted_exc
            level = self.pin_levels.pop(0)
            inputs = self.regs[R.IODIRA]
            reported = (level ^ self.regs[R.IPOLA]) & inputs
            return reported | (self.regs[R.OLATA] & ~inputs & 0xFF)
        return self.regs[reg]


@pytest.fixture
def make_expander():
    """Factory fixture: make_expander(pin_levels) -> FakeExpander."""
    def _make(pin_levels: Iterable[int] = (), **kwargs) -> FakeExpander:
        return FakeExpander(pin_levels, **kwargs)
    return _make


@pytest.fixture
def no_sleep():
    """Records requested delays instead of sleeping."""
    calls: List[float] = []

    def _sleep(seconds: float) -> None:
        calls.append(seconds)

    _sleep.calls = calls
    return _sleep
