# mirror.py
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .config import DEFAULT_DELAY_S, DEFAULT_LIMIT
from .console import change_line, stderr_log
from .errors import ShortReadError, ShortWriteError
from .registers import SELECT_INPUT, SETUP_DIRECTION, SETUP_PULLUP, TEARDOWN, output_write


@dataclass
class MirrorUpdate:
    count: int
    value: int
    line: str


def print_update(update: MirrorUpdate) -> None:
    print(update.line, flush=True)


class PortMirror:
    """
    Mirror expander port A onto port B:
      1) setup: A all inputs (inverted, pull-ups on), B all outputs
      2) poll: read A; when it changes (or on the first read) write it to B
      3) teardown after `limit` changes: A and B inputs, A polarity normal

    `device` is anything with write(bytes) -> int, read(n) -> bytes,
    open(), bind() and close() (see I2CDevice).

    The handle is opened and released by run(). Any short transfer aborts
    the run immediately; teardown is only written on a clean stop or on Ctrl-C once setup is done.
    """

    def __init__(
        self,
        device,
        limit: int = DEFAULT_LIMIT,
        delay_s: float = DEFAULT_DELAY_S,
        log_cb: Optional[Callable[[str], None]] = None,
        on_update: Callable[[MirrorUpdate], None] = print_update,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.device = device
        self.limit = limit
        self.delay_s = delay_s
        self.log = log_cb or stderr_log
        self.on_update = on_update
        self.sleep = sleep
        self.reset()

    def reset(self) -> None:
        self.phase = "setup"  # setup -> poll -> teardown -> done
        self.count = 0
        self.last_value: Optional[int] = None
        self.polls = 0

    @property
    def done(self) -> bool:
        return self.phase == "done"

    # -------------------------
    # RAW TRANSFERS
    # -------------------------
    def _write(self, data: bytes) -> None:
        sent = self.device.write(data)
        if sent != len(data):
            raise ShortWriteError(f"sent {sent} of {len(data)} bytes")

    def _read_byte(self) -> int:
        data = self.device.read(1)
        if len(data) != 1:
            raise ShortReadError(f"got {len(data)} of 1 bytes")
        return data[0]

    # -------------------------
    # PHASES
    # -------------------------
    def setup(self) -> None:
        self._write(SETUP_DIRECTION)
        self._write(SETUP_PULLUP)
        self.log("[MIRROR] Port A inputs (inverted, pull-ups), port B outputs")

    def poll(self) -> Optional[MirrorUpdate]:
        """One read of port A. Returns the update when B was written."""
        self._write(SELECT_INPUT)
        value = self._read_byte()
        self.polls += 1

        if value == self.last_value and self.count >= 1:
            return None

        self.last_value = value
        self._write(output_write(value))

        update = MirrorUpdate(count=self.count, value=value, line=change_line(value, self.count))
        # port B is written: count it before anything that can be interrupted
        self.count += 1
        self.on_update(update)
        self.sleep(self.delay_s)
        return update

    def teardown(self) -> None:
        self._write(TEARDOWN)
        self.log("[MIRROR] Ports A and B restored to inputs")

    def step(self) -> bool:
        """Advance one unit of work; True once teardown has been written."""
        if self.phase == "setup":
            self.setup()
            self.phase = "poll"
            return False

        if self.phase == "poll":
            if self.count >= self.limit:
                self.phase = "teardown"
                return False
            self.poll()
            return False

        if self.phase == "teardown":
            self.teardown()
            self.phase = "done"
            self.log(f"[MIRROR] Finished: {self.count} changes mirrored in {self.polls} reads")
            return True

        return True

    # -------------------------
    # FULL RUN
    # -------------------------
    def run(self) -> int:
        """Open, bind, mirror until the limit, restore, release. Returns changes mirrored."""
        self.reset()
        try:
            self.device.open()
            self.device.bind()
            self.log(f"[MIRROR] Start: mirroring port A to port B for {self.limit} changes")
            try:
                while not self.step():
                    pass
            except KeyboardInterrupt:
                self.log("[MIRROR] Interrupted")
                # during setup the ports were never fully configured
                if self.phase != "setup":
                    self.teardown()
                self.phase = "done"
        finally:
            self.device.close()
        return self.count
