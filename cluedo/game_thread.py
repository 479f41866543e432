"""Runs a game on a background thread."""

from __future__ import annotations

from cluedo.game import Game
from cluedo.player import Player
from cluedo.worker import Worker


class GameThread(Worker):
    """A worker whose work is playing one game."""

    def __init__(
        self,
        game: Game | None = None,
        max_turns: int | None = None,
        name: str = "Game Thread",
    ) -> None:
        super().__init__(name)
        self.game = game if game is not None else Game()
        self.max_turns = max_turns
        self.winner: Player | None = None

    def split(self) -> bool:
        if self.is_running():
            return False
        self.winner = None
        return super().split()

    def join(self) -> bool:
        """Tell a running game to stop, then wait for the thread."""
        if self.is_running():
            self.game.request_stop()
        return super().join()

    def run(self) -> None:
        self.winner = self.game.play(self.max_turns)