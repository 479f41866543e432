"""The interface every participant in a game implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cluedo.card import Accusation, Card, Room

if TYPE_CHECKING:
    from cluedo.board_graph import Token


class Player(ABC):
    """A participant that reacts to what the game tells and asks it.

    Players never call into the game; the game hands them whatever they
    need and asks them for their decisions.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_disqualified = False
        self.token: Token | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @abstractmethod
    def take_possession_of_card(self, card: Card) -> None:
        """Receive a card dealt to this player."""

    def take_position_of_token(self, token: Token) -> None:
        """Take control of a token on the board."""
        self.token = token

    @abstractmethod
    def total_cards_in_possession(self) -> int:
        """Return how many cards this player holds."""

    def be_introduced_to(self, player: Player) -> None:
        """Learn of another player taking part in the game."""

    def prepare_for_game(self) -> None:
        """Get ready once all cards are dealt and everyone is introduced."""

    def solve_murder_mystery(self) -> Accusation | None:
        """Return a final accusation to win the game, or None to pass."""
        return None

    @abstractmethod
    def make_accusation(self) -> Accusation:
        """Return the accusation this player makes this turn."""

    @abstractmethod
    def desired_room(self) -> Room:
        """Return the room this player wants to move to."""

    @abstractmethod
    def refute_accusation(self, accusation: Accusation, accuser: Player) -> Card | None:
        """Return a card that disproves the accusation, or None if none is held."""

    def player_could_not_refute_accusation(
        self, player: Player, accusation: Accusation, accuser: Player
    ) -> None:
        """Learn that a player could not disprove an accusation."""

    def accusation_disproved(
        self, accusation: Accusation, disprover: Player, card: Card | None
    ) -> None:
        """Learn that an accusation was disproved; the card is shown to the accuser only."""

    def accusation_could_not_be_refuted_by_anyone(
        self, accusation: Accusation, accuser: Player
    ) -> None:
        """Learn that no other player could disprove an accusation."""