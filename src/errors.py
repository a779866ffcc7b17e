"""Error types raised by the sink."""


class InvalidArgumentError(ValueError):
    """Raised synchronously to a caller that submits an unusable record."""


class WriteFailure(OSError):
    """Raised inside the writer thread when a record cannot reach disk.

    Never leaves the writer: the record is dropped and the open file reset.
    """
