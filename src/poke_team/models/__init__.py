"""Data models for the Pokemon team builder."""

from poke_team.models.pokemon import MAX_TEAM_SIZE, Pokemon

__all__ = [
    "MAX_TEAM_SIZE",
    "Pokemon",
]
