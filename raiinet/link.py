"""Links: the data and virus pieces that move around the board."""

from __future__ import annotations

from dataclasses import dataclass

DATA = "D"
VIRUS = "V"


@dataclass
class Link:
    """A single link piece and its position and state."""

    kind: str
    letter: str
    strength: int
    owner: int
    row: int = 0
    col: int = 0
    move_range: int = 1
    visible: bool = False
    downloaded: bool = False

    @property
    def is_data(self):
        """Whether the link is currently a data link."""
        return self.kind == DATA

    def toggle_type(self):
        """Turn a data link into a virus and any other link into data."""
        self.kind = VIRUS if self.kind == DATA else DATA

    def boost_range(self):
        """Let the link move two squares at a time."""
        self.move_range = 2

    def reveal(self):
        """Make the link visible to the opponent."""
        self.visible = True

    def mark_downloaded(self):
        """Flip the downloaded state and reveal the link."""
        self.downloaded = not self.downloaded
        self.reveal()

    def increase_strength(self):
        """Raise the link's strength by one."""
        self.strength += 1

    def move_to(self, row, col):
        """Place the link at a new position."""
        self.row = row
        self.col = col