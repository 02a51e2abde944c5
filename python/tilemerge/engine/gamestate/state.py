"""Tracks the state tag, score, and move count of a game in progress."""

from __future__ import annotations

from enum import StrEnum


class GameState(StrEnum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    SANDBOX = "sandbox"


class GameProgress:
    """Holds the game-state tag, the score, and the successful-move counter.

    ``PLAYING`` may become ``WON`` or ``LOST``; ``WON`` becomes ``SANDBOX``
    only on request.  ``LOST`` and ``SANDBOX`` are never re-evaluated.
    """

    def __init__(
        self, state: GameState = GameState.PLAYING, score: int = 0
    ) -> None:
        if score < 0:
            raise ValueError(f"Score cannot be negative, got {score}.")
        self.state = state
        self.score: int = score
        self.moves: int = 0

    # -- score ----------------------------------------------------------------

    def add_score(self, points: int) -> None:
        assert points >= 0, "score never decreases"
        self.score += points

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    # -- transitions ----------------------------------------------------------

    def win(self) -> None:
        if self.state is GameState.PLAYING:
            self.state = GameState.WON

    def lose(self) -> None:
        if self.state is GameState.PLAYING:
            self.state = GameState.LOST

    def resume_after_win(self) -> None:
        if self.state is GameState.WON:
            self.state = GameState.SANDBOX

    @property
    def is_evaluated(self) -> bool:
        """Whether end conditions still apply in the current state."""
        return self.state not in (GameState.SANDBOX, GameState.LOST)
