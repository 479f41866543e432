import random
import time

from cluedo.card import Accusation, Room
from cluedo.computer_player import ComputerPlayer
from cluedo.game import Game
from cluedo.game_thread import GameThread
from cluedo.player import Player


class Idle(Player):
    def take_possession_of_card(self, card):
        pass

    def total_cards_in_possession(self):
        return 0

    def make_accusation(self):
        time.sleep(0.001)
        return Accusation(room=Room.KITCHEN)

    def desired_room(self):
        return Room.KITCHEN

    def refute_accusation(self, accusation, accuser):
        return None


def test_join_before_split():
    assert GameThread(Game()).join() is False


def test_join_stops_endless_game():
    game = Game(rng=random.Random(1))
    game.add_player(Idle("a"))
    game.add_player(Idle("b"))
    worker = GameThread(game)
    assert worker.split()
    assert worker.is_running()
    assert not worker.split()
    assert worker.join()
    assert not worker.is_running()
    assert worker.winner is None


def test_runs_game_to_a_winner():
    game = Game(rng=random.Random(11))
    for name in ("one", "two", "three"):
        game.add_player(ComputerPlayer(name))
    worker = GameThread(game, max_turns=10000)
    assert worker.split()
    deadline = time.monotonic() + 30
    while worker.is_running() and time.monotonic() < deadline:
        time.sleep(0.01)
    assert worker.join()
    assert worker.winner in game.players
    assert worker.winner.solve_murder_mystery() == game.solution


def test_default_game_is_created():
    worker = GameThread()
    assert isinstance(worker.game, Game)
    assert worker.game.players == []
    assert worker.winner is None