from genloop.utils.trackers.backends.tensorboard import TBBackend

__all__ = ["TBBackend"]
