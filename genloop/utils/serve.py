from collections.abc import Iterator
import contextlib
import signal
from typing import Protocol

from loguru import logger


class Abortable(Protocol):
    def abort(self) -> None: ...


@contextlib.contextmanager
def abort_on_signal(
    target: Abortable,
    signals: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM),
) -> Iterator[None]:
    """
    Route SIGINT/SIGTERM to ``target.abort()`` while the block runs.

    The engine then returns its last ranked population instead of dying
    mid-generation. Previous handlers are always restored. Must be entered
    from the main thread.
    """

    def _handler(signum, frame) -> None:
        logger.warning("Received {}, aborting evolution", signal.Signals(signum).name)
        target.abort()

    previous = {sig: signal.getsignal(sig) for sig in signals}
    for sig in signals:
        signal.signal(sig, _handler)
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
