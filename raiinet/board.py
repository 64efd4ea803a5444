"""The game board: squares, the two players and the rules for moving links."""

from __future__ import annotations

from enum import Enum

from raiinet.player import Player
from raiinet.square import BOARD_SIZE, EMPTY, SERVER_PORT_COLUMNS, Square

DEFAULT_ABILITIES = "LFDSP"
WINNING_DOWNLOADS = 4

_PLAYER_ONE_LETTERS = "abcdefgh"
_PLAYER_TWO_LETTERS = "ABCDEFGH"


class GameError(Exception):
    """An action that the rules of the game do not allow."""


class Direction(Enum):
    """The four directions a link may move in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self):
        """The (row, column) step of one square in this direction."""
        return {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }[self]


def _owner_of(letter):
    """The number of the player whose link carries this letter."""
    if len(letter) == 1 and letter in _PLAYER_ONE_LETTERS:
        return 1
    if len(letter) == 1 and letter in _PLAYER_TWO_LETTERS:
        return 2
    raise GameError(f"Invalid Link: {letter!r} doesn't exist")


def _index_of(letter):
    return (_PLAYER_ONE_LETTERS if _owner_of(letter) == 1 else _PLAYER_TWO_LETTERS).index(letter)


class Board:
    """The state of one game: the grid, both players and whose turn it is."""

    def __init__(self, links1, links2, abilities1=DEFAULT_ABILITIES, abilities2=DEFAULT_ABILITIES):
        self.size = BOARD_SIZE
        self.squares = [[Square.initial(row, col) for col in range(BOARD_SIZE)] for row in range(BOARD_SIZE)]
        self.players = [Player(1, links1, abilities1), Player(2, links2, abilities2)]
        self.current = 1
        self.is_over = False
        self.winner = 0

    def link(self, letter):
        """The link that carries this letter, whichever player owns it."""
        return self.players[_owner_of(letter) - 1].links[_index_of(letter)]

    def switch_player(self):
        """Hand the turn to the other player."""
        self.current = 1 if self.current == 2 else 2

    def update_game_state(self, player_number):
        """End the game if this player has four data or four viruses downloaded."""
        player = self.players[player_number - 1]
        if player.downloaded_data == WINNING_DOWNLOADS:
            self.is_over = not self.is_over
            self.winner = player_number
        elif player.downloaded_viruses == WINNING_DOWNLOADS:
            self.is_over = not self.is_over
            self.winner = 2 if player_number == 1 else 1

    def _owns(self, letter):
        return len(letter) == 1 and letter in (
            _PLAYER_ONE_LETTERS if self.current == 1 else _PLAYER_TWO_LETTERS
        )

    def move_link(self, letter, direction):
        """Move one of the current player's links and pass the turn on."""
        if not self._owns(letter):
            raise GameError(f"Invalid move! You don't own: {letter}")
        link = self.link(letter)
        if link.downloaded:
            raise GameError("The link has been downloaded")

        row, col = link.row, link.col
        d_row, d_col = direction.delta
        new_row = row + d_row * link.move_range
        new_col = col + d_col * link.move_range

        if new_row in (0, BOARD_SIZE - 1) and new_col in SERVER_PORT_COLUMNS:
            if (self.current == 1 and new_row == BOARD_SIZE - 1) or (self.current == 2 and new_row == 0):
                self.download_link(letter)
            else:
                raise GameError("You cannot move your link on top of your own server ports")
        elif 0 <= new_row < BOARD_SIZE and 0 <= new_col < BOARD_SIZE:
            self._enter_square(letter, self.squares[new_row][new_col])
        elif (new_row >= BOARD_SIZE and self.current == 1) or (new_row <= -1 and self.current == 2):
            self.own_download(letter)
        else:
            raise GameError("Invalid move! Out of boundary")

        origin = self.squares[row][col]
        origin.content = origin.firewall_content if origin.is_firewall else EMPTY
        origin.toggle_link_on()
        link.move_to(new_row, new_col)
        self.switch_player()

    def _enter_square(self, letter, target):
        other = target.content
        if target.link_on and self._owns(other):
            raise GameError("You cannot move a link on top of another link owned by yourself")
        if target.is_firewall:
            if target.firewall_owner == self.current:
                target.toggle_link_on()
                target.content = letter
            elif self.link(letter).is_data:
                target.toggle_link_on()
                self.link(letter).reveal()
                target.content = letter
            else:
                self.own_download(letter)
        elif not target.link_on:
            target.toggle_link_on()
            target.content = letter
        elif self.battle(letter, other):
            target.content = letter

    def battle(self, letter1, letter2):
        """Reveal both links and download the weaker; True if the first one wins."""
        attacker = self.link(letter1)
        defender = self.link(letter2)
        attacker.reveal()
        defender.reveal()
        if attacker.strength >= defender.strength:
            self.download_link(letter2)
            return True
        self.download_link(letter1)
        return False

    def download_link(self, letter):
        """The opponent of the link's owner downloads it."""
        owner = _owner_of(letter)
        downloader = self.players[2 - owner]
        link = self.link(letter)
        link.mark_downloaded()
        if link.is_data:
            downloader.add_data()
        else:
            downloader.add_virus()
        self.update_game_state(downloader.number)

    def own_download(self, letter):
        """The link's owner downloads their own link."""
        owner = self.players[_owner_of(letter) - 1]
        link = self.link(letter)
        link.mark_downloaded()
        if link.is_data:
            owner.add_data()
        else:
            owner.add_virus()
        self.update_game_state(owner.number)