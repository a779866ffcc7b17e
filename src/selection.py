"""Log file naming and selection of the file the writer appends to next."""

import logging
import os

logger = logging.getLogger(__name__)


def log_file_name(base_name: str, extension: str, index: int) -> str:
    return f"{base_name}_{index}.{extension}"


def select_log_file(
    folder: str, base_name: str, extension: str, max_file_size_bytes: int
) -> tuple[str, int]:
    """Pick the file to append to. Returns (path, existing size in bytes).

    Scans logs_0, logs_1, ... for the first index with no file. The file just
    before that gap is resumed while it is under the size limit; otherwise the
    free index is used. Raises OSError if the resumed file cannot be sized.
    """
    try:
        os.makedirs(folder, exist_ok=True)
    except OSError as e:
        # The open that follows fails and is handled as a write failure.
        logger.warning("Could not create log folder %s: %s", folder, e)

    index = 0
    while os.path.exists(os.path.join(folder, log_file_name(base_name, extension, index))):
        index += 1

    if index > 0:
        last_path = os.path.join(folder, log_file_name(base_name, extension, index - 1))
        size = os.path.getsize(last_path)
        if size < max_file_size_bytes:
            return last_path, size

    return os.path.join(folder, log_file_name(base_name, extension, index)), 0
