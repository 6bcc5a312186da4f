# console.py
import datetime
import sys


def dump_binary(byte: int) -> str:
    """
    Byte as two nibbles, each followed by a space.

    0x5A -> "0101 1010 "
    """
    bits = f"{byte & 0xFF:08b}"
    return f"{bits[:4]} {bits[4:]} "


def format_count(count: int) -> str:
    # at least two digits, right-aligned in four columns: "  00", " 100"
    return f"{count:02d}".rjust(4)


def change_line(value: int, count: int) -> str:
    return dump_binary(value) + format_count(count)


def timestamped(txt: str) -> str:
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    return f"[{ts}] {txt}"


def stderr_log(txt: str) -> None:
    # stdout is kept for the change dump
    print(timestamped(txt), file=sys.stderr)
