import pytest

from raiinet.ability import AbilityName
from raiinet.player import Player
from raiinet.square import Square

LINKS = "V1D2V3D4D1V2V3D4"
ABILITIES = "LFDSP"


def test_player_one_letters_and_columns():
    player = Player(1, LINKS, ABILITIES)
    assert [link.letter for link in player.links] == list("abcdefgh")
    assert [link.col for link in player.links] == list(range(8))
    assert all(link.owner == 1 for link in player.links)


def test_player_two_letters():
    player = Player(2, LINKS, ABILITIES)
    assert [link.letter for link in player.links] == list("ABCDEFGH")


@pytest.mark.parametrize("number", [1, 2])
def test_links_start_on_matching_squares(number):
    player = Player(number, LINKS, ABILITIES)
    for link in player.links:
        square = Square.initial(link.row, link.col)
        assert square.content == link.letter
        assert square.link_on is True


def test_types_and_strengths_come_from_spec():
    player = Player(1, LINKS, ABILITIES)
    assert "".join(f"{link.kind}{link.strength}" for link in player.links) == LINKS


def test_abilities_are_numbered_from_one():
    player = Player(1, LINKS, ABILITIES)
    assert [a.ability_id for a in player.abilities] == [1, 2, 3, 4, 5]
    assert [a.name for a in player.abilities] == [
        AbilityName.LINK_BOOST,
        AbilityName.FIREWALL,
        AbilityName.DOWNLOAD,
        AbilityName.SCAN,
        AbilityName.POLARIZE,
    ]
    assert not any(a.used for a in player.abilities)


def test_counters():
    player = Player(1, LINKS, ABILITIES)
    player.add_data()
    player.add_data()
    player.add_virus()
    player.spend_ability()
    assert player.downloaded_data == 2
    assert player.downloaded_viruses == 1
    assert player.abilities_left == 4


def test_state_text_reflects_counters():
    player = Player(2, LINKS, ABILITIES)
    player.add_virus()
    lines = player.state_text().splitlines()
    assert lines[0] == "Player 2:"
    assert lines[1] == "Downloaded: 0D, 1V"
    assert lines[2] == f"Abilities: {player.abilities_left}"


def test_own_view():
    player = Player(2, "D1D2D3D4V1V2V3V4", ABILITIES)
    assert player.own_view() == "A: D1 B: D2 C: D3 D: D4\nE: V1 F: V2 G: V3 H: V4\n"


def test_opponent_view_all_hidden():
    player = Player(1, LINKS, ABILITIES)
    assert player.opponent_view() == "a: ? b: ? c: ? d: ?\ne: ? f: ? g: ? h: ?\n"


def test_opponent_view_all_visible_matches_own_view():
    player = Player(1, LINKS, ABILITIES)
    for link in player.links:
        link.reveal()
    assert player.opponent_view() == player.own_view()


def test_opponent_view_mixed_pair_pads_hidden_entry():
    player = Player(1, LINKS, ABILITIES)
    player.links[0].reveal()
    assert player.opponent_view() == "a: V1 b: ? c: ? d: ?\ne: ?  f: ? g: ? h: ?\n"


@pytest.mark.parametrize("spec", ["V1D", "VXD2"])
def test_bad_link_spec_raises(spec):
    with pytest.raises(ValueError):
        Player(1, spec, ABILITIES)


def test_bad_ability_initial_raises():
    with pytest.raises(ValueError):
        Player(1, LINKS, "LFDSQ")