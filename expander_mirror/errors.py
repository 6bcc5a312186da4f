# errors.py


class ExpanderError(Exception):
    """Base class: every failure ends the run with this message."""

    message = "Expander error"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(self.message)


class DeviceOpenError(ExpanderError):
    """Bus device node could not be opened."""

    message = "Failed to open device"


class DeviceAccessError(ExpanderError):
    """Peripheral address could not be bound (no ACK / busy)."""

    message = "Unable to access device"


class ShortWriteError(ExpanderError):
    message = "Error writing data"


class ShortReadError(ExpanderError):
    message = "Error reading data"
