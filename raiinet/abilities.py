"""Playing ability cards on a board."""

from __future__ import annotations

from raiinet.ability import AbilityName
from raiinet.board import Board, GameError
from raiinet.link import DATA
from raiinet.square import BOARD_SIZE, EMPTY

_PLAYER_ONE_LETTERS = "abcdefgh"
_PLAYER_TWO_LETTERS = "ABCDEFGH"
_FIREWALL_SYMBOLS = {1: "m", 2: "w"}
_OPPONENT_OF = {1: 2, 2: 1}


def _letters_of(player_number):
    return _PLAYER_ONE_LETTERS if player_number == 1 else _PLAYER_TWO_LETTERS


def _is_letter_of(letter, player_number):
    return letter is not None and len(letter) == 1 and letter in _letters_of(player_number)


def _spend(board: Board, ability):
    ability.toggle_used()
    board.players[board.current - 1].spend_ability()


def _require_present(link):
    if link.downloaded:
        raise GameError("Invalid Link: This Link has been downloaded")


def _clear_square(board: Board, row, col):
    square = board.squares[row][col]
    square.content = EMPTY
    square.toggle_link_on()


def _boost(board, ability, tokens, effect):
    letter = next(tokens, None)
    if not _is_letter_of(letter, board.current):
        return False
    link = board.link(letter)
    _require_present(link)
    effect(link)
    _spend(board, ability)
    return True


def _download(board, ability, tokens):
    letter = next(tokens, None)
    if letter is None:
        return False
    if not _is_letter_of(letter, _OPPONENT_OF[board.current]):
        raise GameError("Invalid Link: Either doesn't exist or isn't owned by your opponent")
    link = board.link(letter)
    _require_present(link)
    row, col = link.row, link.col
    was_visible = link.visible
    board.download_link(letter)
    if not was_visible:
        link.visible = False
    _clear_square(board, row, col)
    _spend(board, ability)
    return True


def _polarize(board, ability, tokens):
    letter = next(tokens, None)
    if _is_letter_of(letter, 1) or (_is_letter_of(letter, 2) and board.current == 2):
        link = board.link(letter)
        _require_present(link)
        link.toggle_type()
        _spend(board, ability)
        return True
    return False


def _scan(board, ability, tokens):
    letter = next(tokens, None)
    if _is_letter_of(letter, 1):
        link = board.link(letter)
        _require_present(link)
    elif _is_letter_of(letter, 2):
        link = board.link(letter)
        index = _PLAYER_TWO_LETTERS.index(letter)
        _require_present(board.players[board.current - 1].links[index])
    else:
        return False
    link.reveal()
    _spend(board, ability)
    return True


def _firewall(board, ability, tokens):
    try:
        row = int(next(tokens, ""))
        col = int(next(tokens, ""))
    except ValueError:
        return False
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise GameError(f"Invalid square: ({row}, {col})")
    square = board.squares[row][col]
    if square.link_on:
        raise GameError("This square is currently occupied by a Link")
    square.place_firewall(board.current, _FIREWALL_SYMBOLS[board.current])
    _spend(board, ability)
    return True


def _exchange(board, ability, tokens):
    first = next(tokens, None)
    second = next(tokens, None)
    if first is None or second is None:
        return False
    if not (_is_letter_of(first, board.current) and _is_letter_of(second, board.current)):
        raise GameError(f"You do not own both of: {first} and {second}")
    link1, link2 = board.link(first), board.link(second)
    if link1.downloaded or link2.downloaded:
        raise GameError("Invalid Links: Some of the Links have been downloaded")
    row1, col1 = link1.row, link1.col
    row2, col2 = link2.row, link2.col
    board.squares[row2][col2].content = first
    board.squares[row1][col1].content = second
    link1.move_to(row2, col2)
    link2.move_to(row1, col1)
    _spend(board, ability)
    return True


def _taunt(board, ability, tokens):
    first = next(tokens, None)
    second = next(tokens, None)
    if first is None or second is None:
        return False
    if not _is_letter_of(first, board.current):
        raise GameError(f"You do not have the link {first}")
    if not _is_letter_of(second, _OPPONENT_OF[board.current]):
        raise GameError(f"Your opponent does not have the link {second}")
    loser = board.link(second) if board.battle(first, second) else board.link(first)
    _clear_square(board, loser.row, loser.col)
    _spend(board, ability)
    return True


def use_ability(board, ability_id, args):
    """Play the current player's ability card with the given id.

    ``args`` holds the card's arguments as strings: link letters, or a row
    and a column for a firewall. Returns whether the card was spent; a play
    the rules accept but that has no effect returns False. Raises GameError
    when the play is refused.
    """
    player = board.players[board.current - 1]
    if not 1 <= ability_id <= min(5, len(player.abilities)):
        raise GameError("Invalid Ability ID: Please enter a number between 1 and 5")
    ability = player.abilities[ability_id - 1]
    if ability.used:
        raise GameError("Invalid Ability: This Ability has been used")
    tokens = iter(args)
    name = ability.name
    if name is AbilityName.LINK_BOOST:
        return _boost(board, ability, tokens, lambda link: link.boost_range())
    if name is AbilityName.BOOST_STRENGTH:
        return _boost(board, ability, tokens, lambda link: link.increase_strength())
    if name is AbilityName.DOWNLOAD:
        return _download(board, ability, tokens)
    if name is AbilityName.POLARIZE:
        return _polarize(board, ability, tokens)
    if name is AbilityName.SCAN:
        return _scan(board, ability, tokens)
    if name is AbilityName.FIREWALL:
        return _firewall(board, ability, tokens)
    if name is AbilityName.EXCHANGE_LOCATION:
        return _exchange(board, ability, tokens)
    if name is AbilityName.TAUNT:
        return _taunt(board, ability, tokens)
    raise GameError("Unknown Ability")


__all__ = ["use_ability", "DATA"]