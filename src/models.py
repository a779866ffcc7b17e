"""Log record model and severity levels accepted by the sink."""

from dataclasses import dataclass

VERBOSE = 2
DEBUG = 3
INFO = 4
WARN = 5
ERROR = 6
ASSERT = 7

LEVEL_NAMES = {
    VERBOSE: "VERBOSE",
    DEBUG: "DEBUG",
    INFO: "INFO",
    WARN: "WARN",
    ERROR: "ERROR",
    ASSERT: "ASSERT",
}


def level_name(level: int) -> str:
    return LEVEL_NAMES.get(level, f"LEVEL({level})")


@dataclass(frozen=True)
class LogRecord:
    level: int
    tag: str | None
    message: str         # already formatted, written verbatim
