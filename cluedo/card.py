"""Cards, accusations and deck handling."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum, IntEnum


class Room(IntEnum):
    KITCHEN = 0
    DINING_ROOM = 1
    LOUNGE = 2
    BALL_ROOM = 3
    HALL = 4
    CONSERVATORY = 5
    BILLIARD_ROOM = 6
    LIBRARY = 7
    STUDY = 8


class Weapon(IntEnum):
    CANDLESTICK = 0
    DAGGER = 1
    LEAD_PIPE = 2
    REVOLVER = 3
    ROPE = 4
    WRENCH = 5


class Character(IntEnum):
    MISS_SCARLETT = 0
    COLONEL_MUSTARD = 1
    MRS_WHITE = 2
    REVEREND_GREEN = 3
    MRS_PEACOCK = 4
    PROFESSOR_PLUM = 5


class CardType(IntEnum):
    ROOM = 0
    WEAPON = 1
    CHARACTER = 2


@dataclass(frozen=True)
class Accusation:
    """A claim naming a weapon, a character and a room."""

    weapon: Weapon = Weapon.CANDLESTICK
    character: Character = Character.MISS_SCARLETT
    room: Room = Room.KITCHEN


_KIND_ENUM = {CardType.ROOM: Room, CardType.WEAPON: Weapon, CardType.CHARACTER: Character}


@dataclass(frozen=True, order=True)
class Card:
    """A single card; cards order by type and then by value."""

    type: CardType
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", CardType(self.type))
        object.__setattr__(self, "value", int(self.value))

    def _as(self, card_type: CardType):
        if self.type is not card_type:
            raise ValueError(f"card is a {self.type.name.lower()} card, not a {card_type.name.lower()} card")
        return _KIND_ENUM[card_type](self.value)

    @property
    def room(self) -> Room:
        return self._as(CardType.ROOM)

    @property
    def weapon(self) -> Weapon:
        return self._as(CardType.WEAPON)

    @property
    def character(self) -> Character:
        return self._as(CardType.CHARACTER)


def generate_deck() -> list[Card]:
    """Return the full deck: weapons, then characters, then rooms."""
    weapons = [
        Weapon.CANDLESTICK, Weapon.DAGGER, Weapon.LEAD_PIPE,
        Weapon.REVOLVER, Weapon.ROPE, Weapon.WRENCH,
    ]
    characters = [
        Character.COLONEL_MUSTARD, Character.MISS_SCARLETT, Character.MRS_PEACOCK,
        Character.MRS_WHITE, Character.PROFESSOR_PLUM, Character.REVEREND_GREEN,
    ]
    rooms = [
        Room.BALL_ROOM, Room.BILLIARD_ROOM, Room.CONSERVATORY, Room.DINING_ROOM,
        Room.HALL, Room.KITCHEN, Room.LIBRARY, Room.LOUNGE, Room.STUDY,
    ]
    return (
        [Card(CardType.WEAPON, w) for w in weapons]
        + [Card(CardType.CHARACTER, c) for c in characters]
        + [Card(CardType.ROOM, r) for r in rooms]
    )


def random_integer(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return an integer in [low, high], rounding a uniform draw to the nearest."""
    rng = rng or random
    x = low + rng.random() * (high - low)
    i = int(math.copysign(math.floor(abs(x) + 0.5), x))
    return max(low, min(high, i))


def shuffle_deck(cards: list[Card], rng: random.Random | None = None) -> None:
    """Shuffle the cards in place."""
    last = len(cards) - 1
    for i in range(last):
        j = random_integer(i, last, rng)
        if i != j:
            cards[i], cards[j] = cards[j], cards[i]


def find_and_remove_card_of_type(cards: list[Card], card_type: CardType) -> Card | None:
    """Remove and return the first card of the given type, or None if there is none."""
    for index, card in enumerate(cards):
        if card.type == card_type:
            return cards.pop(index)
    return None