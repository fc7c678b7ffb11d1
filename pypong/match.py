"""Score keeping for a match between two players."""

from __future__ import annotations

from .controller import Controller


class Match:
    """The scores of two players and the score that ends the match."""

    def __init__(self, first_player: Controller, second_player: Controller, goal_score: int) -> None:
        self.first_player = first_player
        self.second_player = second_player
        self._goal_score = goal_score
        self._first_score = 0
        self._second_score = 0

    @property
    def goal_score(self) -> int:
        """Score a player must reach to win."""
        return self._goal_score

    def assign_point_at(self, player: Controller) -> None:
        """Give one point to ``player``; players not in the match are ignored."""
        if player.paddle_id == self.first_player.paddle_id:
            self._first_score += 1
        elif player.paddle_id == self.second_player.paddle_id:
            self._second_score += 1

    def get_score(self, player: Controller) -> int:
        """Return the score of ``player``, or 0 if it is not in the match."""
        if player.paddle_id == self.first_player.paddle_id:
            return self._first_score
        if player.paddle_id == self.second_player.paddle_id:
            return self._second_score
        return 0

    def is_ended(self) -> bool:
        """Return True once either player has reached the goal score."""
        return self._goal_score in (self._first_score, self._second_score)