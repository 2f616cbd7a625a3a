"""
Module: run_logline_demo.py
Location: test_cases/logline_demo/

Runs several worker threads that log concurrently, optionally into a
log file, with an optional callback that swallows debug records.

Run from the repository root:
    python -m test_cases.logline_demo.run_logline_demo --workers 4 --file demo.log
"""

import argparse
import threading
import time

from src.core.logline.log import debug, log_info, warn
from src.core.logline.log_callback import set_callback
from src.core.logline.log_config import LogConfig, configure
from src.core.logline.log_level import LogLevel


def drop_debug(level, text, source_file, source_line):
    return level is LogLevel.DEBUG


def worker(worker_id: int, iterations: int):
    for i in range(iterations):
        with log_info() as log:
            log << "worker " << worker_id << " step " << i << " crc=" << bytes([worker_id, i % 256])
        debug("worker ", worker_id, " heartbeat")
        time.sleep(0.01)
    warn("worker ", worker_id, " finished")


def main():
    parser = argparse.ArgumentParser(description="Concurrent logline demo")
    parser.add_argument("--workers", type=int, default=3)
    parser.add_argument("--iterations", type=int, default=5)
    parser.add_argument("--file", default=None, help="Append log lines to this file")
    parser.add_argument("--quiet-debug", action="store_true", help="Swallow debug records in a callback")
    args = parser.parse_args()

    config = LogConfig.from_env()
    if args.file:
        config = LogConfig(log_file=args.file, color=config.color, platform_log=config.platform_log)
    configure(config)

    if args.quiet_debug:
        set_callback(drop_debug)

    threads = [
        threading.Thread(target=worker, args=(n, args.iterations))
        for n in range(args.workers)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    print("[Demo] All workers done.")


if __name__ == "__main__":
    main()
