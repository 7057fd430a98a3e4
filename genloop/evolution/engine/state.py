from enum import Enum


class EngineState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINATED = "terminated"
    FAILED = "failed"


class TerminationReason(str, Enum):
    CONDITIONS_MET = "conditions_met"
    INTERRUPTED = "interrupted"


VALID_TRANSITIONS: dict[EngineState, set[EngineState]] = {
    EngineState.IDLE: {EngineState.RUNNING},
    EngineState.RUNNING: {EngineState.TERMINATED, EngineState.FAILED},
    EngineState.TERMINATED: {EngineState.RUNNING},
    EngineState.FAILED: {EngineState.RUNNING},
}


def validate_transition(current: EngineState, new: EngineState) -> None:
    if new not in VALID_TRANSITIONS.get(current, set()):
        valid_next = VALID_TRANSITIONS.get(current, set())
        raise ValueError(
            f"Invalid engine transition: {current.value} -> {new.value}. "
            f"Valid transitions from {current.value}: {sorted(s.value for s in valid_next)}"
        )
