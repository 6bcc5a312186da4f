#!/usr/bin/env python3
# cli.py
import argparse
import sys
from typing import List, Optional

from .config import DEFAULT_ADDRESS, DEFAULT_DELAY_S, DEFAULT_DEVICE, DEFAULT_LIMIT, MirrorConfig
from .console import timestamped
from .errors import ExpanderError
from .i2c_device import I2CDevice
from .mirror import MirrorUpdate, PortMirror, print_update
from .reporting import Reporter


def _device_arg(value: str) -> str:
    """Accept a device node ("/dev/i2c-1") or a bare bus number ("1")."""
    if value.isdigit():
        return f"/dev/i2c-{value}"
    return value


def _address_arg(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address '{value}', expected e.g. 0x20")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expander-mirror",
        description="Mirror MCP23017 port A (inverted inputs, pull-ups) onto port B.",
    )
    parser.add_argument("--device", type=_device_arg, default=DEFAULT_DEVICE,
                        help=f"I2C device node or bus number (default: {DEFAULT_DEVICE})")
    parser.add_argument("--address", type=_address_arg, default=DEFAULT_ADDRESS,
                        help=f"7-bit chip address (default: 0x{DEFAULT_ADDRESS:02X})")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT,
                        help=f"changes to mirror before stopping (default: {DEFAULT_LIMIT})")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY_S,
                        help=f"seconds to pause after each change (default: {DEFAULT_DELAY_S})")
    parser.add_argument("--log-dir", default=None,
                        help="write a session log and Excel report into this directory")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> MirrorConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return MirrorConfig(
            device=args.device,
            address=args.address,
            limit=args.limit,
            delay_s=args.delay,
            log_dir=args.log_dir,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)
    reporter: Optional[Reporter] = None

    def log(txt: str) -> None:
        line = timestamped(txt)
        print(line, file=sys.stderr)
        if reporter is not None:
            reporter.write_line(line)

    def on_update(update: MirrorUpdate) -> None:
        print_update(update)
        if reporter is not None:
            reporter.write_line(update.line)
            reporter.add_change(update)

    if config.log_dir:
        reporter = Reporter(config.log_dir, log_cb=log)
        reporter.open_session(config.device, config.address)

    device = I2CDevice(config.device, config.address, log_cb=log)
    mirror = PortMirror(
        device,
        limit=config.limit,
        delay_s=config.delay_s,
        log_cb=log,
        on_update=on_update,
    )

    try:
        mirror.run()
    except KeyboardInterrupt:
        # before the poll loop started (open/bind), nothing to restore
        log("[MIRROR] Interrupted")
    except ExpanderError as e:
        print(str(e), file=sys.stderr)
        log(f"[MIRROR][ERROR] {e}: {e.detail}" if e.detail else f"[MIRROR][ERROR] {e}")
        return 1
    finally:
        if reporter is not None:
            reporter.write_excel_report()
            reporter.close_session()

    return 0


if __name__ == "__main__":
    sys.exit(main())
