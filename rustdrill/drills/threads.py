"""Answer for the threads drill: a worker completes jobs while the caller waits."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass
class JobStatus:
    """How many jobs have been completed, safe to share between threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def _complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1

    def _completed(self) -> int:
        with self._lock:
            return self.jobs_completed


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> JobStatus:
    """Complete jobs on a worker thread, printing a line while waiting for them."""
    if jobs < 0:
        raise ValueError("jobs must not be negative")
    status = JobStatus()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            status._complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    while status._completed() < jobs:
        print("waiting... ")
        time.sleep(poll_delay)
    worker.join()
    return status