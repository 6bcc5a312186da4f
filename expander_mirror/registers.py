# registers.py
# MCP23017 register map (IOCON.BANK = 0, A/B registers interleaved).
# Sequential writes auto-increment the register address, so one write of
# [IODIRA, a, b, c] lands in IODIRA, IODIRB and IPOLA.

IODIRA   = 0x00  # direction, 1 = input
IODIRB   = 0x01
IPOLA    = 0x02  # input polarity, 1 = inverted
IPOLB    = 0x03
GPINTENA = 0x04
GPINTENB = 0x05
DEFVALA  = 0x06
DEFVALB  = 0x07
INTCONA  = 0x08
INTCONB  = 0x09
IOCON    = 0x0A  # mirrored at 0x0B
GPPUA    = 0x0C  # pull-up enable
GPPUB    = 0x0D
INTFA    = 0x0E
INTFB    = 0x0F
INTCAPA  = 0x10
INTCAPB  = 0x11
GPIOA    = 0x12  # port data
GPIOB    = 0x13
OLATA    = 0x14  # output latch
OLATB    = 0x15

ALL_INPUTS  = 0xFF
ALL_OUTPUTS = 0x00

# =========================================================
# FIXED TRANSFERS
# =========================================================
# Port A inputs, port B outputs, port A polarity inverted
SETUP_DIRECTION = bytes([IODIRA, ALL_INPUTS, ALL_OUTPUTS, 0xFF])

# Pull-ups on every port A pin
SETUP_PULLUP = bytes([GPPUA, 0xFF])

# Both ports back to inputs, port A polarity normal
TEARDOWN = bytes([IODIRA, ALL_INPUTS, ALL_INPUTS, 0x00])

SELECT_INPUT = bytes([GPIOA])


def output_write(value: int) -> bytes:
    """Two-byte transfer that drives port B with `value`."""
    return bytes([GPIOB, value & 0xFF])
