# config.py
from dataclasses import dataclass
from typing import Optional

# Defaults (same wiring as the breadboard: MCP23017 with A2..A0 tied low)
DEFAULT_DEVICE = "/dev/i2c-0"
DEFAULT_ADDRESS = 0x20
DEFAULT_LIMIT = 10        # number of mirrored changes before stopping
DEFAULT_DELAY_S = 0.2     # pause after each mirrored change

# Valid 7-bit addresses (0x00..0x02 and 0x78..0x7F are reserved)
MIN_ADDRESS = 0x03
MAX_ADDRESS = 0x77


@dataclass(frozen=True)
class MirrorConfig:
    device: str = DEFAULT_DEVICE
    address: int = DEFAULT_ADDRESS
    limit: int = DEFAULT_LIMIT
    delay_s: float = DEFAULT_DELAY_S
    log_dir: Optional[str] = None   # None -> no session log / report

    def __post_init__(self):
        if not self.device:
            raise ValueError("device path must not be empty")
        if not (MIN_ADDRESS <= self.address <= MAX_ADDRESS):
            raise ValueError(
                f"Invalid address: 0x{self.address:02X} "
                f"(expected 0x{MIN_ADDRESS:02X}..0x{MAX_ADDRESS:02X})"
            )
        if self.limit < 1:
            raise ValueError(f"Invalid limit: {self.limit}")
        if self.delay_s < 0:
            raise ValueError(f"Invalid delay: {self.delay_s}")
