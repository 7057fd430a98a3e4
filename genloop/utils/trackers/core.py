from __future__ import annotations

from queue import Empty, Full, Queue
import threading
import time
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, Field

from genloop.utils.trackers.base import LogWriter


def _sanitize(s: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_.=," else "_" for ch in str(s))


def render_tag(path: list[str], metric: str, labels: dict[str, str]) -> str:
    base = "/".join(_sanitize(x) for x in [*path, metric] if x)
    if not labels:
        return base
    return base + (
        "/"
        + ",".join(f"{_sanitize(k)}={_sanitize(v)}" for k, v in sorted(labels.items()))
    )


class TrackerEvent(BaseModel):
    kind: Literal["scalar", "text"]
    tag: str
    value: float | None = None
    text: str | None = None
    step: int | None = None
    wall_time: float = Field(default_factory=time.time)


class LoggerBackend:
    """
    Adapter every tracking backend implements.
    write_* may buffer; flush() pushes buffered data out.
    """

    def open(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def write_scalar(self, tag: str, value: float, step: int, wall_time: float) -> None:
        raise NotImplementedError

    def write_text(self, tag: str, text: str, step: int, wall_time: float) -> None:
        raise NotImplementedError

    def flush(self) -> None:
        raise NotImplementedError


class GenericLogger(LogWriter):
    """
    Queued writer: callers enqueue events, a daemon thread hands them to the backend.

    Steps default to a per-tag counter when the caller does not pass one.
    Events offered to a full queue are dropped with a warning.
    """

    def __init__(
        self, backend: LoggerBackend, *, queue_size: int = 8192, flush_secs: float = 3.0
    ):
        self.backend = backend
        self._steps: dict[str, int] = {}
        self._q: Queue[TrackerEvent] = Queue(maxsize=queue_size)
        self._stop = threading.Event()
        self._closed = False
        self._flush_secs = float(flush_secs)
        self._last_flush = time.time()
        self._handle_lock = threading.Lock()

        self.backend.open()
        self._t = threading.Thread(
            target=self._loop, name="tracker-writer", daemon=True
        )
        self._t.start()

    def bind(
        self, *, path: list[str] | None = None, labels: dict[str, str] | None = None
    ) -> BoundWriter:
        return BoundWriter(self, path or [], labels or {})

    def scalar(self, metric: str, value: float, **kw) -> None:
        if self._closed:
            return
        self._offer(
            TrackerEvent(
                kind="scalar",
                tag=render_tag(kw.get("path") or [], metric, kw.get("labels") or {}),
                value=float(value),
                step=kw.get("step"),
                wall_time=kw.get("wall_time") or time.time(),
            )
        )

    def text(self, tag: str, text: str, **kw) -> None:
        if self._closed:
            return
        self._offer(
            TrackerEvent(
                kind="text",
                tag=render_tag(kw.get("path") or [], tag, kw.get("labels") or {}),
                text=text,
                step=kw.get("step"),
                wall_time=kw.get("wall_time") or time.time(),
            )
        )

    def close(self, drain_timeout_s: float = 1.5) -> None:
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        if self._t.is_alive():
            self._t.join(timeout=2.0)

        deadline = time.time() + max(0.0, drain_timeout_s)
        while time.time() < deadline:
            try:
                event = self._q.get_nowait()
            except Empty:
                break
            self._handle(event)

        try:
            self.backend.flush()
        finally:
            self.backend.close()

    def _offer(self, event: TrackerEvent) -> None:
        try:
            self._q.put_nowait(event)
        except Full:
            logger.warning("[Tracker] Queue full, dropping event {}", event.tag)

    def _loop(self) -> None:
        while not self._stop.is_set():
            try:
                event = self._q.get(timeout=0.1)
            except Empty:
                event = None
            if event is not None:
                self._handle(event)
            now = time.time()
            if (now - self._last_flush) >= self._flush_secs:
                self._flush_backend()
                self._last_flush = now

    def _handle(self, event: TrackerEvent) -> None:
        with self._handle_lock:
            step = self._resolve_step(event.tag, event.step)
            try:
                if event.kind == "scalar":
                    self.backend.write_scalar(
                        event.tag, event.value, step, event.wall_time
                    )
                else:
                    self.backend.write_text(
                        event.tag, event.text or "", step, event.wall_time
                    )
            except Exception as exc:  # pylint: disable=broad-except
                logger.warning("[Tracker] Backend write failed for {}: {}", event.tag, exc)

    def _flush_backend(self) -> None:
        try:
            self.backend.flush()
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("[Tracker] Backend flush failed: {}", exc)

    def _resolve_step(self, tag: str, step: int | None) -> int:
        if step is None:
            step = self._steps.get(tag, -1) + 1
        self._steps[tag] = int(step)
        return int(step)


class BoundWriter(LogWriter):
    """A LogWriter view with a fixed path prefix and labels."""

    def __init__(self, base: GenericLogger, path: list[str], labels: dict[str, str]):
        self._base = base
        self._path = list(path)
        self._labels = dict(labels)

    def bind(
        self, *, path: list[str] | None = None, labels: dict[str, str] | None = None
    ) -> BoundWriter:
        return BoundWriter(
            self._base, [*self._path, *(path or [])], {**self._labels, **(labels or {})}
        )

    def scalar(self, metric: str, value: float, **kw: Any) -> None:
        path = [*self._path, *kw.pop("path", [])]
        labels = {**self._labels, **kw.pop("labels", {})}
        self._base.scalar(metric, value, path=path, labels=labels, **kw)

    def text(self, tag: str, text: str, **kw: Any) -> None:
        path = [*self._path, *kw.pop("path", [])]
        labels = {**self._labels, **kw.pop("labels", {})}
        self._base.text(tag, text, path=path, labels=labels, **kw)

    def close(self) -> None:
        self._base.close()
