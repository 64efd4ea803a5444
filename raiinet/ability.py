"""Ability cards that a player may play once per game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AbilityName(Enum):
    """The kinds of ability, keyed by the initial used to choose them."""

    LINK_BOOST = "L"
    FIREWALL = "F"
    DOWNLOAD = "D"
    POLARIZE = "P"
    SCAN = "S"
    BOOST_STRENGTH = "B"
    EXCHANGE_LOCATION = "E"
    TAUNT = "T"


@dataclass
class Ability:
    """One ability card held by a player."""

    name: AbilityName
    ability_id: int
    used: bool = False

    @classmethod
    def from_initial(cls, ability_id, initial):
        """Build an ability from its one-letter initial."""
        try:
            name = AbilityName(initial)
        except ValueError:
            raise ValueError(f"Invalid Ability Name: {initial!r}") from None
        return cls(name, ability_id)

    def toggle_used(self):
        """Flip whether this ability has been used."""
        self.used = not self.used