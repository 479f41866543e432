"""A player that deduces the solution from the cards it learns about."""

from __future__ import annotations

from cluedo.card import Accusation, Card, CardType, Room, generate_deck
from cluedo.player import Player


def _cards_named(accusation: Accusation) -> list[Card]:
    return [
        Card(CardType.WEAPON, accusation.weapon),
        Card(CardType.CHARACTER, accusation.character),
        Card(CardType.ROOM, accusation.room),
    ]


class ComputerPlayer(Player):
    """Tracks every card known not to be in the solution and asks about the rest."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._hand: list[Card] = []
        self._known: set[Card] = set()

    def take_possession_of_card(self, card: Card) -> None:
        self._hand.append(card)
        self._known.add(card)

    def total_cards_in_possession(self) -> int:
        return len(self._hand)

    def _unknown(self, card_type: CardType) -> list[Card]:
        return [c for c in generate_deck() if c.type == card_type and c not in self._known]

    def desired_room(self) -> Room:
        rooms = self._unknown(CardType.ROOM)
        return rooms[0].room if rooms else Room.BALL_ROOM

    def make_accusation(self) -> Accusation:
        weapons = self._unknown(CardType.WEAPON)
        characters = self._unknown(CardType.CHARACTER)
        accusation = Accusation(room=self.desired_room())
        if weapons:
            accusation = Accusation(weapons[0].weapon, accusation.character, accusation.room)
        if characters:
            accusation = Accusation(accusation.weapon, characters[0].character, accusation.room)
        return accusation

    def refute_accusation(self, accusation: Accusation, accuser: Player) -> Card | None:
        named = _cards_named(accusation)
        return next((card for card in self._hand if card in named), None)

    def accusation_disproved(
        self, accusation: Accusation, disprover: Player, card: Card | None
    ) -> None:
        if card is not None:
            self._known.add(card)

    def accusation_could_not_be_refuted_by_anyone(
        self, accusation: Accusation, accuser: Player
    ) -> None:
        if accuser is not self:
            return
        for named in _cards_named(accusation):
            if named in self._hand:
                continue
            self._known.update(
                c for c in generate_deck() if c.type == named.type and c != named
            )

    def solve_murder_mystery(self) -> Accusation | None:
        weapons = self._unknown(CardType.WEAPON)
        characters = self._unknown(CardType.CHARACTER)
        rooms = self._unknown(CardType.ROOM)
        if len(weapons) == len(characters) == len(rooms) == 1:
            return Accusation(weapons[0].weapon, characters[0].character, rooms[0].room)
        return None