from enum import Enum, unique


@unique
class RunState(str, Enum):
    IDLE = "idle"
    ADVANCING = "advancing"
    FINISHED = "finished"
    FAILED = "failed"
