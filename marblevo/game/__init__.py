from marblevo.game.level import launch_from_drag
from marblevo.game.scoreboard import Scoreboard
from marblevo.game.session import GameSession
from marblevo.game.states import AIModeState, HumanModeState

__all__ = [
    "AIModeState",
    "GameSession",
    "HumanModeState",
    "Scoreboard",
    "launch_from_drag",
]
