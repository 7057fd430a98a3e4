from genloop.utils.trackers.backends.tensorboard import TBBackend
from genloop.utils.trackers.base import LogWriter
from genloop.utils.trackers.configs import TBConfig
from genloop.utils.trackers.core import GenericLogger, LoggerBackend

_tb_default: GenericLogger | None = None


def init_tb(
    cfg: TBConfig, *, queue_size: int = 8192, flush_secs: float = 3.0
) -> GenericLogger:
    global _tb_default
    if _tb_default is not None:
        return _tb_default
    backend = TBBackend(cfg)
    _tb_default = GenericLogger(backend, queue_size=queue_size, flush_secs=flush_secs)
    return _tb_default


def get_tb() -> GenericLogger:
    if _tb_default is None:
        raise ValueError("TensorBoard tracker not initialized. Call init_tb() first.")
    return _tb_default


__all__ = [
    "GenericLogger",
    "LogWriter",
    "LoggerBackend",
    "TBBackend",
    "TBConfig",
    "get_tb",
    "init_tb",
]
