from __future__ import annotations

import fcntl
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from task_tracker.errors import StorageLockError

_THREAD_MUTEXES: dict[str, threading.Lock] = {}


def lock_path_for(target: Path) -> Path:
    return target.with_suffix(target.suffix + ".lock")


def _thread_mutex(path: Path) -> threading.Lock:
    key = str(path.resolve())
    lock = _THREAD_MUTEXES.get(key)
    if lock is None:
        lock = _THREAD_MUTEXES.setdefault(key, threading.Lock())
    return lock


@contextmanager
def file_lock(target: Path, timeout: float = 10.0, poll_interval: float = 0.05) -> Iterator[Path]:
    """Hold an exclusive lock on ``<target>.lock`` for the duration of the block.

    ``fcntl.flock`` serializes separate processes; the per-path mutex
    serializes threads of this process.

    Raises:
        StorageLockError: if the lock is still held elsewhere after ``timeout``.
        ValueError: if ``timeout`` or ``poll_interval`` is not positive.
    """
    if timeout <= 0:
        raise ValueError(f"timeout must be positive (got {timeout})")
    if poll_interval <= 0:
        raise ValueError(f"poll_interval must be positive (got {poll_interval})")

    start = time.monotonic()
    lock_target = lock_path_for(Path(target))
    lock_target.parent.mkdir(parents=True, exist_ok=True)

    mutex = _thread_mutex(lock_target)
    if not mutex.acquire(timeout=timeout):
        raise StorageLockError(f"Could not acquire lock on {target} within {timeout}s")

    try:
        with open(lock_target, "a+", encoding="utf-8") as fh:
            while True:
                try:
                    fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                    break
                except OSError:
                    if time.monotonic() - start >= timeout:
                        raise StorageLockError(
                            f"Could not acquire lock on {target} within {timeout}s"
                        ) from None
                    time.sleep(poll_interval)
            try:
                yield target
            finally:
                fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
    finally:
        mutex.release()
