import pytest

from raiinet.abilities import use_ability
from raiinet.board import Board, GameError

LINKS = "V1V2V3V4D1D2D3D4"


@pytest.fixture
def board():
    return Board(LINKS, LINKS)


@pytest.fixture
def extra_board():
    return Board(LINKS, LINKS, "BETLF", "BETLF")


@pytest.mark.parametrize("ability_id", [0, 6, -1])
def test_invalid_id(board, ability_id):
    with pytest.raises(GameError):
        use_ability(board, ability_id, ["a"])


def test_link_boost(board):
    assert use_ability(board, 1, ["a"]) is True
    assert board.link("a").move_range == 2
    assert board.players[0].abilities[0].used
    assert board.players[0].abilities_left == 4


def test_used_ability_is_refused(board):
    use_ability(board, 1, ["a"])
    with pytest.raises(GameError):
        use_ability(board, 1, ["b"])
    assert board.link("b").move_range == 1


def test_link_boost_on_opponent_link_has_no_effect(board):
    assert use_ability(board, 1, ["A"]) is False
    assert board.link("A").move_range == 1
    assert not board.players[0].abilities[0].used


def test_link_boost_on_downloaded_link(board):
    board.link("a").mark_downloaded()
    with pytest.raises(GameError):
        use_ability(board, 1, ["a"])


def test_missing_argument_has_no_effect(board):
    assert use_ability(board, 1, []) is False
    assert board.players[0].abilities_left == 5


def test_firewall_player_one(board):
    assert use_ability(board, 2, ["3", "3"]) is True
    square = board.squares[3][3]
    assert square.is_firewall
    assert square.content == "m"
    assert square.firewall_owner == 1


def test_firewall_player_two(board):
    board.switch_player()
    use_ability(board, 2, ["4", "2"])
    square = board.squares[4][2]
    assert square.content == "w"
    assert square.firewall_owner == 2
    assert board.players[1].abilities_left == 4


def test_firewall_on_occupied_square(board):
    with pytest.raises(GameError):
        use_ability(board, 2, ["0", "0"])
    assert not board.squares[0][0].is_firewall


def test_firewall_with_non_numbers(board):
    assert use_ability(board, 2, ["x", "y"]) is False
    assert not board.players[0].abilities[1].used


def test_firewall_out_of_board(board):
    with pytest.raises(GameError):
        use_ability(board, 2, ["9", "0"])


def test_download_opponent_link(board):
    assert use_ability(board, 3, ["A"]) is True
    link = board.link("A")
    assert link.downloaded
    assert not link.visible
    assert board.players[0].downloaded_viruses == 1
    assert board.squares[7][0].content == "."
    assert not board.squares[7][0].link_on


def test_download_keeps_revealed_link_visible(board):
    board.link("E").reveal()
    use_ability(board, 3, ["E"])
    assert board.link("E").visible
    assert board.players[0].downloaded_data == 1


def test_download_own_link_is_refused(board):
    with pytest.raises(GameError):
        use_ability(board, 3, ["a"])
    assert not board.link("a").downloaded


def test_scan_reveals(board):
    assert use_ability(board, 4, ["B"]) is True
    assert board.link("B").visible


def test_polarize_own_link(board):
    use_ability(board, 5, ["a"])
    assert board.link("a").kind == "D"


def test_polarize_twice_round_trip(board):
    use_ability(board, 5, ["e"])
    board.switch_player()
    use_ability(board, 5, ["e"])
    assert board.link("e").kind == "D"


def test_player_one_cannot_polarize_uppercase(board):
    assert use_ability(board, 5, ["A"]) is False
    assert board.link("A").kind == "V"


def test_boost_strength(extra_board):
    use_ability(extra_board, 1, ["a"])
    assert extra_board.link("a").strength == 2


def test_exchange_location(extra_board):
    assert use_ability(extra_board, 2, ["a", "h"]) is True
    a, h = extra_board.link("a"), extra_board.link("h")
    assert (a.row, a.col) == (0, 7)
    assert (h.row, h.col) == (0, 0)
    assert extra_board.squares[0][0].content == "h"
    assert extra_board.squares[0][7].content == "a"


def test_exchange_requires_ownership(extra_board):
    with pytest.raises(GameError):
        use_ability(extra_board, 2, ["a", "A"])


def test_taunt_attacker_wins(extra_board):
    assert use_ability(extra_board, 3, ["h", "A"]) is True
    assert extra_board.link("A").downloaded
    assert extra_board.players[0].downloaded_viruses == 1
    assert extra_board.squares[7][0].content == "."


def test_taunt_attacker_loses(extra_board):
    use_ability(extra_board, 3, ["a", "D"])
    assert extra_board.link("a").downloaded
    assert extra_board.players[1].downloaded_viruses == 1
    assert extra_board.squares[0][0].content == "."


def test_taunt_requires_own_then_opponent(extra_board):
    with pytest.raises(GameError):
        use_ability(extra_board, 3, ["A", "a"])
    with pytest.raises(GameError):
        use_ability(extra_board, 3, ["a", "b"])