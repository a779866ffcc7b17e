"""CLI log inspector: list, read, and search the sink's log files."""

import argparse
import os
import sys

from src.inspector import list_log_files, read_all, read_file, search_files


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def main():
    parser = argparse.ArgumentParser(description="Inspect disk log sink files")
    parser.add_argument("--log-dir", default=os.environ.get("LOG_FOLDER", "./logs"),
                        help="Directory containing log files")
    parser.add_argument("--base-name", default=os.environ.get("LOG_BASE_NAME", "logs"))
    parser.add_argument("--extension", default=os.environ.get("LOG_EXTENSION", "csv"))
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List log files in index order")
    group.add_argument("--read", metavar="FILENAME", help="Read a specific log file")
    group.add_argument("--cat", action="store_true", help="Print all log files in order")
    group.add_argument("--search", metavar="TEXT", help="Search text across all log files")
    args = parser.parse_args()

    if args.list:
        files = list_log_files(args.log_dir, args.base_name, args.extension)
        if not files:
            print("No log files found.")
            return
        for name in files:
            size = os.path.getsize(os.path.join(args.log_dir, name))
            print(f"  {name}  ({_format_size(size)})")

    elif args.read:
        try:
            sys.stdout.write(read_file(args.log_dir, args.read))
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    elif args.cat:
        sys.stdout.write(read_all(args.log_dir, args.base_name, args.extension))

    elif args.search:
        results = search_files(args.log_dir, args.search, args.base_name, args.extension)
        if not results:
            print(f"No matches found for '{args.search}'.")
            return
        for filename, line_num, line in results:
            print(f"  [{filename}:{line_num}] {line}")


if __name__ == "__main__":
    main()
