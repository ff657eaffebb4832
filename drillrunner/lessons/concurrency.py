"""Sharing state and data between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


@dataclass
class JobStatus:
    """Number of jobs finished so far, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def complete_job(self) -> int:
        """Count one more finished job and return the new total."""
        with self._lock:
            self.jobs_completed += 1
            return self.jobs_completed


def run_jobs(jobs: int = 10, interval: float = 0.25) -> int:
    """Finish jobs on a worker thread while watching progress; return how often it waited."""
    if jobs < 0:
        raise ValueError(f"number of jobs must not be negative, got {jobs}")
    if interval < 0:
        raise ValueError(f"interval must not be negative, got {interval}")
    status = JobStatus()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(interval)
            status.complete_job()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while status.jobs_completed < jobs:
        print("waiting... ")
        waits += 1
        time.sleep(interval * 2)
    worker.join()
    return waits


def offset_sums(numbers: Iterable[int] | None = None, workers: int = 8) -> list[int]:
    """Sum every workers-th number starting at each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError(f"number of workers must be positive, got {workers}")
    shared = tuple(range(100) if numbers is None else numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        sums = list(pool.map(lambda offset: sum(shared[offset::workers]), range(workers)))
    for offset, total in enumerate(sums):
        print(f"Sum of offset {offset} is {total}")
    return sums