from cluedo.card import Accusation, Card, CardType, Character, Room, Weapon
from cluedo.computer_player import ComputerPlayer
from cluedo.human_player import HumanPlayer


def scripted(*replies):
    answers = iter(replies)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(answers)

    return ask, prompts


def test_desired_room_by_number():
    ask, _ = scripted("2")
    player = HumanPlayer("Ann", ask=ask, tell=lambda text: None)
    assert player.desired_room() == Room.DINING_ROOM


def test_desired_room_by_name():
    ask, _ = scripted("Ball Room")
    player = HumanPlayer("Ann", ask=ask, tell=lambda text: None)
    assert player.desired_room() == Room.BALL_ROOM


def test_invalid_reply_asks_again():
    ask, prompts = scripted("zzz", "99", "lounge")
    told = []
    player = HumanPlayer("Ann", ask=ask, tell=told.append)
    assert player.desired_room() == Room.LOUNGE
    assert len(prompts) == 3
    assert len(told) == 2


def test_accusation_uses_chosen_room():
    ask, _ = scripted("study", "rope", "mrs peacock")
    player = HumanPlayer("Ann", ask=ask, tell=lambda text: None)
    room = player.desired_room()
    assert player.make_accusation() == Accusation(Weapon.ROPE, Character.MRS_PEACOCK, room)


def test_counts_cards():
    player = HumanPlayer("Ann", ask=lambda prompt: "", tell=lambda text: None)
    player.take_possession_of_card(Card(CardType.ROOM, Room.HALL))
    player.take_possession_of_card(Card(CardType.WEAPON, Weapon.DAGGER))
    assert player.total_cards_in_possession() == 2


def test_single_matching_card_is_shown_without_asking():
    ask, prompts = scripted()
    player = HumanPlayer("Ann", ask=ask, tell=lambda text: None)
    dagger = Card(CardType.WEAPON, Weapon.DAGGER)
    player.take_possession_of_card(dagger)
    shown = player.refute_accusation(Accusation(weapon=Weapon.DAGGER), ComputerPlayer("cpu"))
    assert shown == dagger
    assert prompts == []


def test_several_matching_cards_are_chosen():
    ask, prompts = scripted("2")
    player = HumanPlayer("Ann", ask=ask, tell=lambda text: None)
    dagger = Card(CardType.WEAPON, Weapon.DAGGER)
    hall = Card(CardType.ROOM, Room.HALL)
    player.take_possession_of_card(dagger)
    player.take_possession_of_card(hall)
    accusation = Accusation(weapon=Weapon.DAGGER, room=Room.HALL)
    assert player.refute_accusation(accusation, ComputerPlayer("cpu")) == hall
    assert len(prompts) == 1


def test_no_matching_card():
    told = []
    player = HumanPlayer("Ann", ask=lambda prompt: "", tell=told.append)
    player.take_possession_of_card(Card(CardType.ROOM, Room.HALL))
    assert player.refute_accusation(Accusation(room=Room.STUDY), ComputerPlayer("cpu")) is None
    assert any("cpu" in text for text in told)


def test_shown_card_is_reported():
    told = []
    player = HumanPlayer("Ann", ask=lambda prompt: "", tell=told.append)
    card = Card(CardType.CHARACTER, Character.MRS_WHITE)
    player.accusation_disproved(Accusation(), ComputerPlayer("cpu"), card)
    assert "Mrs White" in told[-1]