import pytest

from rpsls.errors import InvalidHandSetError, ScoreTrackingDisabledError
from rpsls.game import Game
from rpsls.rules import UNKNOWN_HAND
from rpsls.schemas import Result
from rpsls.scoreboard import ScoreBoard

RPSLS = ["ROCK", "PAPER", "SCISSORS", "SPOCK", "LIZARD"]


class FixedPicker:
    def __init__(self, hand: str) -> None:
        self.hand = hand
        self.calls = 0

    def pick(self, accepted_hands):
        self.calls += 1
        assert self.hand in accepted_hands
        return self.hand


def make_game(server_hand: str = "SCISSORS", track_score: bool = True) -> Game:
    return Game(RPSLS, picker=FixedPicker(server_hand), scoreboard=ScoreBoard() if track_score else None)


def test_game_rejects_even_hand_set():
    with pytest.raises(InvalidHandSetError):
        Game(["ROCK", "PAPER"])


@pytest.mark.parametrize(
    "body, expected",
    [
        (b'{"hand": "ROCK"}', "ROCK"),
        (b'{"hand": "FIRE"}', "FIRE"),
        (b"not json", UNKNOWN_HAND),
        (b"", UNKNOWN_HAND),
        (b"{}", UNKNOWN_HAND),
        (b'{"hand": 3}', UNKNOWN_HAND),
        (b'["ROCK"]', UNKNOWN_HAND),
        (b"\xff\xfe", UNKNOWN_HAND),
    ],
)
def test_parse_hand(body, expected):
    assert make_game().parse_hand(body) == expected


def test_play_uses_picker_and_records_score():
    game = make_game("SCISSORS")
    outcome = game.play("ROCK")
    assert outcome.result is Result.WIN
    assert outcome.computer_hand == "SCISSORS"
    assert game.picker.calls == 1
    assert game.score().wins == 1


def test_play_raw_with_malformed_body_is_unknown():
    game = make_game("ROCK")
    outcome = game.play_raw(b"{oops")
    assert outcome.result is Result.UNKNOWN
    assert outcome.computer_hand is None
    score = game.score()
    assert (score.wins, score.losses, score.draws) == (0, 0, 0)


def test_play_raw_tracks_all_results():
    game = make_game("PAPER")
    game.play_raw(b'{"hand": "SCISSORS"}')
    game.play_raw(b'{"hand": "ROCK"}')
    game.play_raw(b'{"hand": "PAPER"}')
    score = game.score()
    assert (score.wins, score.losses, score.draws) == (1, 1, 1)


def test_score_without_scoreboard_fails():
    game = make_game(track_score=False)
    assert game.play("ROCK").result is Result.WIN
    assert not game.tracks_score
    with pytest.raises(ScoreTrackingDisabledError):
        game.score()


def test_default_picker_returns_accepted_hands():
    game = Game(RPSLS)
    for _ in range(20):
        assert game.play("ROCK").computer_hand in RPSLS
