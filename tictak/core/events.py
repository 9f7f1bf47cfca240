"""
Notifications emitted by the game engine.

Sound and haptics collaborators subscribe to these values and decide on
their own what to play.
"""
from enum import Enum


class GameEvent(Enum):
    HUMAN_MOVED = 'human_moved'
    COMPUTER_MOVED = 'computer_moved'
    HUMAN_WON = 'human_won'
    COMPUTER_WON = 'computer_won'
    DRAW = 'draw'


# File names shipped with the mobile client's sound bank
SOUND_EFFECTS = {
    GameEvent.HUMAN_MOVED: 'player_move.aif',
    GameEvent.COMPUTER_MOVED: 'computer_move.aif',
    GameEvent.HUMAN_WON: 'win.aif',
    GameEvent.COMPUTER_WON: 'lose.aif',
    GameEvent.DRAW: 'draw.aif',
}
