# expander_mirror
from .config import MirrorConfig
from .errors import (
    DeviceAccessError,
    DeviceOpenError,
    ExpanderError,
    ShortReadError,
    ShortWriteError,
)
from .i2c_device import I2CDevice
from .mirror import MirrorUpdate, PortMirror

__version__ = "0.2.0"

__all__ = [
    "MirrorConfig",
    "ExpanderError",
    "DeviceOpenError",
    "DeviceAccessError",
    "ShortWriteError",
    "ShortReadError",
    "I2CDevice",
    "MirrorUpdate",
    "PortMirror",
]
