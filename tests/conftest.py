import pytest

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.game.rules import create_initial_state, place_piece

# Fills the board with no four-in-a-row: columns 0, 1, 4, 5 read RYRYRY
# bottom-up and columns 2, 3, 6 read YRYRYR.
DRAW_MOVES = [0, 2, 2, 0] * 3 + [1, 3, 3, 1] * 3 + [4, 6, 6, 4] * 3 + [5] * 6


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])


@pytest.fixture
def play():
    """Return a function replaying columns from the initial position."""
    def _play(moves):
        state = create_initial_state()
        for column in moves:
            state = place_piece(state, column)
        return state
    return _play


@pytest.fixture
def drawn_state(play):
    return play(DRAW_MOVES)


@pytest.fixture
def draw_moves():
    return list(DRAW_MOVES)
