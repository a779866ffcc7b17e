"""Disk log sink demo: producer threads submit formatted records to rotating CSV files."""

import argparse
import logging
import random
import signal
import sys
import threading
import time
from datetime import datetime, timezone

from src import models
from src.config import load_config, load_yaml_config
from src.sink import DiskLogSink

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [disk-log-sink] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_running = True


def _signal_handler(sig, _frame):
    global _running
    logger.info("Shutdown signal received (signal %d), stopping...", sig)
    _running = False


LEVELS = [models.INFO, models.INFO, models.INFO, models.DEBUG, models.WARN, models.ERROR]
TAGS = ["auth", "sync", "ui", "network", None]
MESSAGES = {
    models.DEBUG: ["Entering request handler", "Cache lookup started"],
    models.INFO: ["Request processed successfully", "Session restored", "Sync completed"],
    models.WARN: ["Slow response from upstream", "Retrying request"],
    models.ERROR: ["Connection reset by peer", "Failed to parse response"],
}


def format_line(level: int, tag: str | None, message: str) -> str:
    now = datetime.now(timezone.utc)
    timestamp = now.strftime("%Y-%m-%d %H:%M:%S.") + f"{now.microsecond // 1000:03d}"
    return f"{timestamp},{models.level_name(level)},{tag or ''},{message}\n"


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Disk log sink demo")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    parser.add_argument("--producers", type=int, default=4,
                        help="Number of producer threads (default: 4)")
    parser.add_argument("--count", type=int, default=0,
                        help="Records per producer, 0 = until interrupted (default: 0)")
    parser.add_argument("--interval", type=float, default=0.05,
                        help="Seconds between records per producer (default: 0.05)")
    return parser


def produce(sink: DiskLogSink, count: int, interval: float):
    sent = 0
    while _running and (count == 0 or sent < count):
        level = random.choice(LEVELS)
        tag = random.choice(TAGS)
        sink.submit(level, tag, format_line(level, tag, random.choice(MESSAGES[level])))
        sent += 1
        time.sleep(interval)


def main():
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    args = build_cli_parser().parse_args()
    config = load_config(load_yaml_config(args.config))
    logger.info(
        "Config: folder=%s, files=%s_N.%s, max_size=%d bytes, queue_size=%d",
        config.folder_path, config.base_name, config.extension,
        config.max_file_size_bytes, config.queue_size,
    )

    with DiskLogSink(config) as sink:
        threads = [
            threading.Thread(target=produce, args=(sink, args.count, args.interval), daemon=True)
            for _ in range(args.producers)
        ]
        for t in threads:
            t.start()
        try:
            for t in threads:
                while t.is_alive():
                    t.join(timeout=0.5)
        except KeyboardInterrupt:
            pass

    logger.info("Shut down cleanly. Stats: %s", sink.metrics.snapshot())


if __name__ == "__main__":
    main()
