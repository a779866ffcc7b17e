"""Inspector logic: list, read, and search the sink's numbered log files."""

import os
import re


def _index_pattern(base_name: str, extension: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(base_name)}_(\d+)\.{re.escape(extension)}$")


def list_log_files(log_dir: str, base_name: str = "logs", extension: str = "csv") -> list[str]:
    """Return the sink's log files sorted by numeric index (logs_2 before logs_10)."""
    if not os.path.isdir(log_dir):
        return []
    pattern = _index_pattern(base_name, extension)
    indexed = []
    for name in os.listdir(log_dir):
        m = pattern.match(name)
        if m:
            indexed.append((int(m.group(1)), name))
    indexed.sort()
    return [name for _, name in indexed]


def read_file(log_dir: str, filename: str, encoding: str = "utf-8") -> str:
    path = os.path.join(log_dir, filename)
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def read_all(log_dir: str, base_name: str = "logs", extension: str = "csv",
             encoding: str = "utf-8") -> str:
    """Concatenate every log file in index order, i.e. in submission order."""
    return "".join(
        read_file(log_dir, name, encoding)
        for name in list_log_files(log_dir, base_name, extension)
    )


def search_files(log_dir: str, text: str, base_name: str = "logs",
                 extension: str = "csv", encoding: str = "utf-8") -> list[tuple[str, int, str]]:
    """Search for text across all log files. Returns (filename, line_num, line) tuples."""
    results = []
    for filename in list_log_files(log_dir, base_name, extension):
        path = os.path.join(log_dir, filename)
        try:
            with open(path, "r", encoding=encoding, errors="replace") as f:
                for line_num, line in enumerate(f, 1):
                    if text in line:
                        results.append((filename, line_num, line.rstrip("\n")))
        except OSError:
            continue
    return results
