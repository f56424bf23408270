from enum import Enum


class HumanModeState(str, Enum):
    INACTIVE = "inactive"
    # pointer held down, launch direction is being chosen
    INITIALIZATION_PHASE = "initialization_phase"
    LAUNCHED = "launched"
    STOPPED = "stopped"


class AIModeState(str, Enum):
    INACTIVE = "inactive"
    # marbles launched, iteration in progress
    LAUNCHED = "launched"
    # marbles stopped, next iteration can start
    NEW_ITERATION_READY = "new_iteration_ready"
