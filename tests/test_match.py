import pytest

from pypong.controller import PlayerController, PlayerPosition
from pypong.match import Match
from pypong.objects import Paddle


def _player(position):
    return PlayerController(position, Paddle(10, 80), lambda key: False)


@pytest.fixture
def players():
    return _player(PlayerPosition.LEFT), _player(PlayerPosition.RIGHT)


def test_scores_start_at_zero(players):
    first, second = players
    match = Match(first, second, 11)
    assert match.get_score(first) == 0
    assert match.get_score(second) == 0
    assert not match.is_ended()


def test_goal_score_is_kept(players):
    assert Match(*players, 11).goal_score == 11


def test_assign_point_goes_to_right_player(players):
    first, second = players
    match = Match(first, second, 11)
    match.assign_point_at(second)
    match.assign_point_at(second)
    match.assign_point_at(first)
    assert match.get_score(first) == 1
    assert match.get_score(second) == 2


def test_player_identified_by_paddle(players):
    first, second = players
    match = Match(first, second, 11)
    same_paddle = PlayerController(PlayerPosition.LEFT, first.paddle, lambda key: True)
    match.assign_point_at(same_paddle)
    assert match.get_score(first) == 1


def test_stranger_is_ignored(players):
    first, second = players
    match = Match(first, second, 11)
    stranger = _player(PlayerPosition.LEFT)
    match.assign_point_at(stranger)
    assert match.get_score(stranger) == 0
    assert match.get_score(first) == 0
    assert match.get_score(second) == 0


@pytest.mark.parametrize("winner_index", [0, 1])
def test_match_ends_at_goal(players, winner_index):
    match = Match(*players, 3)
    winner = players[winner_index]
    for _ in range(2):
        match.assign_point_at(winner)
        assert not match.is_ended()
    match.assign_point_at(winner)
    assert match.is_ended()
    assert match.get_score(winner) == match.goal_score