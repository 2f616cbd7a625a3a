import re
import threading

from src.core.logline.log_level import LogLevel
from src.core.logline.log_record import LogRecord


LINE_PATTERN = re.compile(r"^\[09:05:33\|Info \] worker-(\d+) item-(\d+) (\S+) \(t\.py:(\d+)\)$")


def test_concurrent_lines_never_interleave(selector, console) -> None:
    workers = 8
    per_worker = 50

    def work(worker_id: int) -> None:
        for item in range(per_worker):
            with LogRecord(LogLevel.INFO, "t.py", worker_id, selector=selector) as record:
                record << "worker-" << worker_id << " item-" << item << " "
                record << "x" * 20

    threads = [threading.Thread(target=work, args=(i,)) for i in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = console.getvalue().splitlines()
    assert len(lines) == workers * per_worker
    for line in lines:
        match = LINE_PATTERN.match(line)
        assert match is not None, line
        assert match.group(1) == match.group(4)


def test_record_holds_lock_for_its_whole_scope(selector, console) -> None:
    first_entered = threading.Event()
    release_first = threading.Event()
    second_entered = threading.Event()

    def first() -> None:
        with LogRecord(LogLevel.INFO, "t.py", 1, selector=selector) as record:
            first_entered.set()
            release_first.wait(timeout=5)
            record << "first"

    def second() -> None:
        first_entered.wait(timeout=5)
        with LogRecord(LogLevel.INFO, "t.py", 2, selector=selector) as record:
            second_entered.set()
            record << "second"

    t1 = threading.Thread(target=first)
    t2 = threading.Thread(target=second)
    t1.start()
    t2.start()

    assert first_entered.wait(timeout=5)
    assert not second_entered.wait(timeout=0.2)

    release_first.set()
    t1.join(timeout=5)
    t2.join(timeout=5)

    assert console.getvalue().splitlines() == [
        "[09:05:33|Info ] first (t.py:1)",
        "[09:05:33|Info ] second (t.py:2)",
    ]
