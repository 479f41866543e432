"""A player whose decisions are asked of a person."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

from cluedo.card import Accusation, Card, CardType, Character, Room, Weapon
from cluedo.player import Player

T = TypeVar("T")


def _label(member: Enum) -> str:
    return member.name.replace("_", " ").title()


def _card_label(card: Card) -> str:
    return _label(getattr(card, card.type.name.lower()))


class HumanPlayer(Player):
    """Asks a person through `ask` and informs them through `tell`."""

    def __init__(
        self,
        name: str,
        ask: Callable[[str], str] = input,
        tell: Callable[[str], object] = print,
    ) -> None:
        super().__init__(name)
        self._ask = ask
        self._tell = tell
        self._hand: list[Card] = []
        self._room: Room | None = None

    def _choose(self, question: str, options: Sequence[T], label: Callable[[T], str]) -> T:
        labels = [label(option) for option in options]
        menu = "\n".join(f"{n}. {text}" for n, text in enumerate(labels, start=1))
        while True:
            reply = self._ask(f"{question}\n{menu}\n> ").strip().lower()
            if reply.isdigit() and 1 <= int(reply) <= len(options):
                return options[int(reply) - 1]
            for option, text in zip(options, labels):
                if reply == text.lower():
                    return option
            self._tell(f"Please answer with a number from 1 to {len(options)} or a name.")

    def take_possession_of_card(self, card: Card) -> None:
        self._hand.append(card)
        self._tell(f"You receive the card {_card_label(card)}.")

    def total_cards_in_possession(self) -> int:
        return len(self._hand)

    def desired_room(self) -> Room:
        self._room = self._choose("Which room do you want to go to?", list(Room), _label)
        return self._room

    def make_accusation(self) -> Accusation:
        room = self._room if self._room is not None else self.desired_room()
        weapon = self._choose("Which weapon was used?", list(Weapon), _label)
        character = self._choose("Who did it?", list(Character), _label)
        return Accusation(weapon=weapon, character=character, room=room)

    def refute_accusation(self, accusation: Accusation, accuser: Player) -> Card | None:
        named = {
            Card(CardType.WEAPON, accusation.weapon),
            Card(CardType.CHARACTER, accusation.character),
            Card(CardType.ROOM, accusation.room),
        }
        matching = [card for card in self._hand if card in named]
        if not matching:
            self._tell(f"You cannot disprove the accusation of {accuser.name}.")
            return None
        if len(matching) == 1:
            card = matching[0]
        else:
            card = self._choose(f"Which card do you show {accuser.name}?", matching, _card_label)
        self._tell(f"You show {accuser.name} the card {_card_label(card)}.")
        return card

    def player_could_not_refute_accusation(
        self, player: Player, accusation: Accusation, accuser: Player
    ) -> None:
        self._tell(f"{player.name} could not disprove the accusation of {accuser.name}.")

    def accusation_disproved(
        self, accusation: Accusation, disprover: Player, card: Card | None
    ) -> None:
        if card is not None:
            self._tell(f"{disprover.name} shows you the card {_card_label(card)}.")
        else:
            self._tell(f"{disprover.name} disproved the accusation.")

    def accusation_could_not_be_refuted_by_anyone(
        self, accusation: Accusation, accuser: Player
    ) -> None:
        self._tell(f"Nobody could disprove the accusation of {accuser.name}.")