"""Sharing data between threads and tracking progress under a lock."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


def offset_sums(numbers: Sequence[int] = range(100), threads: int = 8) -> list[int]:
    """Sum every threads-th number from each offset, one thread per offset."""
    if threads <= 0:
        raise ValueError(f"thread count must be positive, got {threads}")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=threads) as pool:
        sums = list(pool.map(lambda offset: sum(shared[offset::threads]), range(threads)))
    for offset, total in enumerate(sums):
        print(f"Sum of offset {offset} is {total}")
    return sums


@dataclass
class JobStatus:
    """Number of jobs completed, guarded by a lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, compare=False, repr=False
    )


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> JobStatus:
    """Complete jobs in a worker thread while the caller waits for them all."""
    if jobs < 0:
        raise ValueError(f"job count must not be negative, got {jobs}")
    status = JobStatus()

    def worker() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            with status.lock:
                status.jobs_completed += 1

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    while True:
        with status.lock:
            if status.jobs_completed >= jobs:
                break
        print("waiting... ")
        time.sleep(poll_delay)
    thread.join()
    return status