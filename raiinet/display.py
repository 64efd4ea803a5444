"""Text view of a game: the grid, both players' headers and their links."""

from __future__ import annotations

from raiinet.ability import AbilityName
from raiinet.square import BOARD_SIZE, EMPTY, SERVER_PORT, SERVER_PORT_COLUMNS

_LABELS = {
    AbilityName.LINK_BOOST: "LinkBoost",
    AbilityName.FIREWALL: "Firewall",
    AbilityName.DOWNLOAD: "Download",
    AbilityName.POLARIZE: "Polarize",
    AbilityName.SCAN: "Scan",
    AbilityName.BOOST_STRENGTH: "BoostStrength",
    AbilityName.EXCHANGE_LOCATION: "ExchangeLocation",
    AbilityName.TAUNT: "Taunt",
}
_LABEL_WIDTH = 19
_CARD_SIZE = 5
_DIVIDER = "========\n"


def ability_label(name):
    """The display name of an ability kind."""
    return _LABELS[name]


def _starting_grid(players):
    positions = {
        (link.row, link.col): link.letter
        for player in reversed(players)
        for link in reversed(player.links)
    }
    grid = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            if row in (0, BOARD_SIZE - 1) and col in SERVER_PORT_COLUMNS:
                cells.append(SERVER_PORT)
            else:
                cells.append(positions.get((row, col), EMPTY))
        grid.append(cells)
    return grid


class DisplayBoard:
    """What one player sees of the game, rendered as text."""

    def __init__(self, players, player_number=1):
        self.players = players
        self.player_number = player_number
        self.grid = _starting_grid(players)

    def update(self, board):
        """Refresh the grid from the board and follow whose turn it is."""
        self.player_number = board.current
        self.grid = [[square.content for square in row] for row in board.squares]

    def render(self):
        """The full board view from the current player's side."""
        first, second = self.players[0], self.players[1]
        if self.player_number == 1:
            first_links, second_links = first.own_view(), second.opponent_view()
        else:
            first_links, second_links = first.opponent_view(), second.own_view()
        rows = "".join("".join(row) + "\n" for row in self.grid)
        return (
            first.state_text()
            + first_links
            + _DIVIDER
            + rows
            + _DIVIDER
            + second.state_text()
            + second_links
        )

    def __str__(self):
        return self.render()

    def ability_card(self, player_number):
        """The list of a player's abilities and whether each has been used."""
        lines = [
            f"               Player {player_number}",
            "------------- ABILITY CARD --------------",
        ]
        for ability in self.players[player_number - 1].abilities[:_CARD_SIZE]:
            used = "Yes" if ability.used else "No"
            label = ability_label(ability.name).ljust(_LABEL_WIDTH)
            lines.append(f"ID: {ability.ability_id}   Name: {label}Used: {used}")
        lines.append("-----------------------------------------")
        return "\n".join(lines) + "\n"