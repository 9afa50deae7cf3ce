"""A fixed pool of worker threads draining a shared job queue."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit of work: wait for ``sleep_duration`` seconds, then report."""

    data: str
    sleep_duration: float = 0.0

    def process(self) -> None:
        time.sleep(self.sleep_duration)
        print("Processed job with data:", self.data, flush=True)


class Worker:
    """Processes jobs from a queue until it reads ``None``, then signals done."""

    def __init__(self, job_queue: queue.Queue, done: queue.Queue) -> None:
        self.job_queue = job_queue
        self.done = done

    def start(self) -> None:
        """Run the worker loop in the calling thread."""
        while (job := self.job_queue.get()) is not None:
            job.process()
        self.done.put(True)


class WorkerPool:
    """Runs ``worker_count`` workers in background threads."""

    def __init__(self, worker_count: int) -> None:
        if worker_count < 1:
            raise ValueError("worker_count must be at least 1")
        self.worker_count = worker_count
        self._jobs: queue.Queue = queue.Queue()
        self._done: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self.workers = [Worker(self._jobs, self._done) for _ in range(worker_count)]
        self._threads = [
            threading.Thread(target=worker.start, daemon=True) for worker in self.workers
        ]
        for thread in self._threads:
            thread.start()

    def add_job(self, job: Job) -> None:
        """Queue a job; raises RuntimeError once the pool is shut down."""
        if job is None:
            raise ValueError("job must not be None")
        with self._lock:
            if self._closed:
                raise RuntimeError("worker pool is shut down")
            self._jobs.put(job)

    def shutdown(self) -> None:
        """Stop accepting jobs and wait until every worker has finished."""
        with self._lock:
            if self._closed:
                raise RuntimeError("worker pool is already shut down")
            self._closed = True
            for _ in range(self.worker_count):
                self._jobs.put(None)
        for _ in range(self.worker_count):
            self._done.get()
        for thread in self._threads:
            thread.join()
        print("All workers have stopped.", flush=True)

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, *exc_info) -> None:
        if not self._closed:
            self.shutdown()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run jobs on a worker pool.")
    parser.add_argument("--workers", type=int, default=3)
    parser.add_argument("--jobs", type=int, default=8)
    parser.add_argument("--sleep", type=float, default=2.0)
    args = parser.parse_args(argv)

    pool = WorkerPool(args.workers)
    for i in range(1, args.jobs + 1):
        pool.add_job(Job(data=f"Task {i}", sleep_duration=args.sleep))
    pool.shutdown()
    return 0