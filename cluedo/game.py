"""The shared game state and the coordination of turns."""

from __future__ import annotations

import itertools
import random
import threading

from cluedo.board_graph import BoardGraph
from cluedo.card import (
    Accusation,
    CardType,
    find_and_remove_card_of_type,
    generate_deck,
    random_integer,
    shuffle_deck,
)
from cluedo.player import Player


class Game:
    """Deals the cards and runs the turns, calling into the players."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.board_graph = BoardGraph()
        self.players: list[Player] = []
        self.solution: Accusation | None = None
        self._rng = rng if rng is not None else random.Random()
        self._stop = threading.Event()

    def add_player(self, player: Player) -> bool:
        """Add a player; return False if one with the same name already plays."""
        if any(existing.name == player.name for existing in self.players):
            return False
        self.players.append(player)
        return True

    def request_stop(self) -> None:
        """Ask a running game to end before its next turn."""
        self._stop.set()

    def play(self, max_turns: int | None = None) -> Player | None:
        """Play a game and return the winner, or None if it ends without one."""
        if not self.players:
            raise ValueError("a game needs at least one player")
        try:
            self._set_up()
            return self._run_turns(max_turns)
        finally:
            self._stop.clear()

    def _set_up(self) -> None:
        self.board_graph.regenerate()

        cards = generate_deck()
        shuffle_deck(cards, self._rng)
        room = find_and_remove_card_of_type(cards, CardType.ROOM)
        weapon = find_and_remove_card_of_type(cards, CardType.WEAPON)
        character = find_and_remove_card_of_type(cards, CardType.CHARACTER)
        self.solution = Accusation(
            weapon=weapon.weapon, character=character.character, room=room.room
        )

        for player in self.players:
            player.is_disqualified = False
        for player, card in zip(itertools.cycle(self.players), reversed(cards)):
            player.take_possession_of_card(card)

        for player in self.players:
            for other in self.players:
                if other is not player:
                    player.be_introduced_to(other)

        for player in self.players:
            player.prepare_for_game()

    def _run_turns(self, max_turns: int | None) -> Player | None:
        count = len(self.players)
        for turn in itertools.count():
            if max_turns is not None and turn >= max_turns:
                return None
            if self._stop.is_set():
                return None
            if all(player.is_disqualified for player in self.players):
                return None

            index = turn % count
            player = self.players[index]
            # Disqualified players sit out but still answer other players.
            if player.is_disqualified:
                continue

            self._take_turn(index)

            final = player.solve_murder_mystery()
            if final is not None:
                if final == self.solution:
                    return player
                player.is_disqualified = True
        return None

    def _take_turn(self, index: int) -> None:
        player = self.players[index]
        desired = player.desired_room()

        # Reaching the desired room is a matter of chance.
        if random_integer(0, 100, self._rng) <= 50:
            return

        accusation = player.make_accusation()
        if accusation.room != desired:
            return

        count = len(self.players)
        others = [self.players[(index + k) % count] for k in range(1, count)]
        for other in others:
            card = other.refute_accusation(accusation, player)
            if card is not None:
                for listener in self.players:
                    if listener is not other:
                        shown = card if listener is player else None
                        listener.accusation_disproved(accusation, other, shown)
                return
            for listener in self.players:
                if listener is not other:
                    listener.player_could_not_refute_accusation(other, accusation, player)

        for listener in self.players:
            listener.accusation_could_not_be_refuted_by_anyone(accusation, player)