"""
Conditions that end a game.
"""


class GameOver(Exception):
    """Base class for the ways a game can end on its own."""

    reason = "game_over"


class SelfCollision(GameOver):
    """The snake's new head landed on its own body."""

    reason = "self_collision"

    def __init__(self, head):
        super().__init__("Game Over! You hit yourself.")
        self.head = head


class PerfectScore(GameOver):
    """The snake fills the whole board, so no food can be placed."""

    reason = "perfect_score"

    def __init__(self):
        super().__init__("The game ended on perfect score")
