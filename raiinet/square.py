"""Squares of the 8x8 game board."""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
SERVER_PORT = "S"
EMPTY = "."
SERVER_PORT_COLUMNS = (3, 4)


def _start_letter(row, col):
    """The letter of the link that starts on this square, if any."""
    in_port_columns = col in SERVER_PORT_COLUMNS
    if (row == 0 and not in_port_columns) or (row == 1 and in_port_columns):
        return chr(ord("a") + col)
    if (row == 7 and not in_port_columns) or (row == 6 and in_port_columns):
        return chr(ord("A") + col)
    return None


@dataclass
class Square:
    """One square of the board and what currently sits on it."""

    row: int
    col: int
    content: str = EMPTY
    link_on: bool = False
    is_server_port: bool = False
    is_firewall: bool = False
    firewall_content: str = EMPTY
    firewall_owner: int = 0

    @classmethod
    def initial(cls, row, col):
        """The square at (row, col) as it is when a game starts."""
        if row in (0, BOARD_SIZE - 1) and col in SERVER_PORT_COLUMNS:
            return cls(row, col, SERVER_PORT, is_server_port=True)
        letter = _start_letter(row, col)
        if letter is not None:
            return cls(row, col, letter, link_on=True)
        return cls(row, col)

    def toggle_link_on(self):
        """Flip whether a link stands on this square."""
        self.link_on = not self.link_on

    def place_firewall(self, owner, symbol):
        """Flip the firewall flag and mark the square with the owner's symbol."""
        self.is_firewall = not self.is_firewall
        self.content = symbol
        self.firewall_content = symbol
        self.firewall_owner = owner