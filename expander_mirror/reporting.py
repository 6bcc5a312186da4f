# reporting.py
import datetime
import os
from typing import Callable, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font

from .console import dump_binary
from .mirror import MirrorUpdate


class Reporter:
    """
    Session files for one mirror run:
      MIRROR_<ts>.log   every log line and change line, flushed as written
      MIRROR_<ts>.xlsx  one row per mirrored change
    """

    def __init__(self, logs_dir: str, log_cb: Callable[[str], None]):
        self.logs_dir = logs_dir
        self.log_cb = log_cb
        os.makedirs(self.logs_dir, exist_ok=True)

        self.log_file = None
        self.session_ts: Optional[str] = None
        self.log_path: Optional[str] = None
        self.rows: List[list] = []

    def open_session(self, device: str, address: int) -> None:
        self.close_session()

        self.session_ts = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        self.log_path = os.path.join(self.logs_dir, f"MIRROR_{self.session_ts}.log")
        self.log_file = open(self.log_path, "w")
        self.rows = []

        self.write_line(f"=== MIRROR START - {device} @ 0x{address:02X} ===")
        self.log_cb(f"[REPORT] Log created: {self.log_path}")

    def write_line(self, line: str) -> None:
        # caller adds timestamps where wanted
        if self.log_file:
            self.log_file.write(line + "\n")
            self.log_file.flush()

    def add_change(self, update: MirrorUpdate) -> None:
        ts = datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
        self.rows.append([update.count, f"0x{update.value:02X}", dump_binary(update.value).strip(), ts])

    def close_session(self) -> None:
        if self.log_file:
            self.log_file.close()
        self.log_file = None

    def write_excel_report(self) -> str:
        ts = self.session_ts or datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        path = os.path.join(self.logs_dir, f"MIRROR_{ts}.xlsx")

        wb = Workbook()
        ws = wb.active
        ws.title = "Changes"

        ws.append(["Count", "Hex", "Binary", "Time"])
        for cell in ws[1]:
            cell.font = Font(bold=True)

        for row in self.rows:
            ws.append(row)

        wb.save(path)
        self.log_cb(f"[REPORT] Excel report saved: {path} ({len(self.rows)} changes)")
        return path
