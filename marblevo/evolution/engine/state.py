from __future__ import annotations

from enum import Enum


class ControllerState(str, Enum):
    """Phase of the generation controller.

    IDLE -> EVALUATING -> REPRODUCING -> IDLE is one generation. Killing
    the population drops an evaluating controller straight back to IDLE.
    """

    IDLE = "idle"
    EVALUATING = "evaluating"
    REPRODUCING = "reproducing"

    def next_states(self) -> frozenset[ControllerState]:
        return _NEXT_STATES[self]

    def can_become(self, new: ControllerState) -> bool:
        return new is self or new in self.next_states()


_NEXT_STATES: dict[ControllerState, frozenset[ControllerState]] = {
    ControllerState.IDLE: frozenset({ControllerState.EVALUATING}),
    ControllerState.EVALUATING: frozenset(
        {ControllerState.REPRODUCING, ControllerState.IDLE}
    ),
    ControllerState.REPRODUCING: frozenset({ControllerState.IDLE}),
}
