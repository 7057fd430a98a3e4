class GenLoopError(Exception):
    """Base for all genloop exceptions."""

    pass


class InvalidArgumentError(GenLoopError, ValueError):
    """Malformed engine inputs, rejected before a run starts."""

    pass


class EvolutionError(GenLoopError):
    """Evolution process failures."""

    pass


class EvaluationFailedError(EvolutionError):
    """A fitness evaluation task raised.

    The first failing task's exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, candidate: object = None):
        super().__init__(message)
        self.candidate = candidate


class ContractViolationError(EvolutionError):
    """A plug-in broke its contract, e.g. returned the wrong number of candidates."""

    pass


class NotTerminatedError(GenLoopError, RuntimeError):
    """Terminal state was requested before any run completed."""

    pass


class EvolutionInterrupted(GenLoopError):
    """Cooperative cancellation was observed while a run was in progress."""

    pass
