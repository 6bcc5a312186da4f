# i2c_device.py
from typing import Callable, Optional

from smbus2 import SMBus, i2c_msg

from .console import stderr_log
from .errors import DeviceAccessError, DeviceOpenError, ShortReadError, ShortWriteError


class I2CDevice:
    """
    One addressed peripheral on a Linux i2c-dev bus.

    write()/read() are plain I2C transfers (no SMBus command byte), so a
    register is selected by writing its address first and then reading.
    Every bus-level OSError is translated into the ExpanderError family.
    """

    def __init__(self, device: str, address: int, log_cb: Optional[Callable[[str], None]] = None):
        self.device = device
        self.address = address
        self.log = log_cb or stderr_log
        self._bus: Optional[SMBus] = None

    @property
    def is_open(self) -> bool:
        return self._bus is not None

    # -------------------------
    # HANDLE
    # -------------------------
    def open(self) -> None:
        if self._bus is not None:
            return
        try:
            self._bus = SMBus(self.device)
        except OSError as e:
            raise DeviceOpenError(f"{self.device}: {e}") from e
        self.log(f"[I2C] Opened {self.device}")

    def bind(self) -> None:
        """Claim the address and check the chip answers (SMBus quick write)."""
        bus = self._require_open()
        try:
            bus.write_quick(self.address)
        except OSError as e:
            raise DeviceAccessError(f"0x{self.address:02X} on {self.device}: {e}") from e
        self.log(f"[I2C] Bound address 0x{self.address:02X}")

    def close(self) -> None:
        if self._bus is None:
            return
        try:
            self._bus.close()
        finally:
            self._bus = None
            self.log(f"[I2C] Closed {self.device}")

    def __enter__(self) -> "I2CDevice":
        self.open()
        try:
            self.bind()
        except Exception:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _require_open(self) -> SMBus:
        if self._bus is None:
            raise DeviceOpenError(f"{self.device} is not open")
        return self._bus

    # -------------------------
    # TRANSFERS
    # -------------------------
    def write(self, data: bytes) -> int:
        """Write `data` in one transfer; returns the number of bytes sent."""
        bus = self._require_open()
        msg = i2c_msg.write(self.address, list(data))
        try:
            bus.i2c_rdwr(msg)
        except OSError as e:
            raise ShortWriteError(f"write of {len(data)} bytes to 0x{self.address:02X}: {e}") from e
        return len(msg)

    def read(self, length: int) -> bytes:
        bus = self._require_open()
        msg = i2c_msg.read(self.address, length)
        try:
            bus.i2c_rdwr(msg)
        except OSError as e:
            raise ShortReadError(f"read of {length} bytes from 0x{self.address:02X}: {e}") from e
        return bytes(msg)
