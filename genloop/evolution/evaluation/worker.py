from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import os
import threading

from loguru import logger

_shared_executor: ThreadPoolExecutor | None = None
_shared_executor_lock = threading.Lock()


def default_worker_count() -> int:
    return os.cpu_count() or 1


def get_shared_executor() -> ThreadPoolExecutor:
    """Process-wide fitness worker pool, created on first use.

    Idle workers exit with the interpreter's executor shutdown, so the pool
    never keeps a finished program alive.
    """
    global _shared_executor
    if _shared_executor is not None:
        return _shared_executor
    with _shared_executor_lock:
        if _shared_executor is None:
            workers = default_worker_count()
            _shared_executor = ThreadPoolExecutor(
                max_workers=workers, thread_name_prefix="fitness-worker"
            )
            logger.debug("[FitnessWorker] Shared pool started | workers={}", workers)
    return _shared_executor
