"""A player: their links, ability cards and download tallies."""

from __future__ import annotations

from raiinet.ability import Ability
from raiinet.link import Link

ABILITIES_PER_PLAYER = 5
_LINKS_PER_ROW = 4


def _face(link):
    return f"{link.letter}: {link.kind}{link.strength}"


def _start_row(number, index):
    in_port_columns = index in (3, 4)
    if number == 1:
        return 1 if in_port_columns else 0
    return 6 if in_port_columns else 7


class Player:
    """One of the two players of a game."""

    def __init__(self, number, link_spec, ability_spec):
        self.number = number
        self.downloaded_data = 0
        self.downloaded_viruses = 0
        self.abilities_left = ABILITIES_PER_PLAYER
        self.links = self._parse_links(link_spec)
        self.abilities = [
            Ability.from_initial(ability_id, initial)
            for ability_id, initial in enumerate(ability_spec, start=1)
        ]

    def _parse_links(self, spec):
        if len(spec) % 2:
            raise ValueError(f"Link placement must be type/strength pairs: {spec!r}")
        first = ord("a") if self.number == 1 else ord("A")
        links = []
        for index, (kind, strength) in enumerate(zip(spec[0::2], spec[1::2])):
            if not strength.isdigit():
                raise ValueError(f"Invalid link strength: {strength!r}")
            link = Link(kind, chr(first + index), int(strength), self.number)
            link.move_to(_start_row(self.number, index), index)
            links.append(link)
        return links

    def add_data(self):
        """Count one more downloaded data link."""
        self.downloaded_data += 1

    def add_virus(self):
        """Count one more downloaded virus."""
        self.downloaded_viruses += 1

    def spend_ability(self):
        """Count one ability as used."""
        self.abilities_left -= 1

    def state_text(self):
        """The player's header: number, downloads and abilities left."""
        return (
            f"Player {self.number}:\n"
            f"Downloaded: {self.downloaded_data}D, {self.downloaded_viruses}V\n"
            f"Abilities: {self.abilities_left}\n"
        )

    def own_view(self):
        """All links with type and strength, as the owner sees them."""
        faces = [_face(link) for link in self.links]
        rows = (faces[i:i + _LINKS_PER_ROW] for i in range(0, len(faces), _LINKS_PER_ROW))
        return "".join(" ".join(row) + "\n" for row in rows)

    def opponent_view(self):
        """The links as the opponent sees them, hidden ones shown as '?'."""
        top, bottom = [], []
        for first, second in zip(self.links[:_LINKS_PER_ROW], self.links[_LINKS_PER_ROW:]):
            hidden_suffix = " " if first.visible != second.visible else ""
            for link, column in ((first, top), (second, bottom)):
                column.append(_face(link) if link.visible else f"{link.letter}: ?{hidden_suffix}")
        return " ".join(top) + "\n" + " ".join(bottom) + "\n"