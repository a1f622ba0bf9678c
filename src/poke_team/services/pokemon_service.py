"""Per-user Pokemon team management."""

import logging
import threading
from typing import Mapping, Optional, Sequence

from poke_team.models.pokemon import MAX_TEAM_SIZE, Pokemon
from poke_team.services.pokeapi_client import MockPokeApiClient, PokeApiClient

logger = logging.getLogger(__name__)


class PokemonService:
    """In-memory roster of user teams on top of the Pokemon catalog.

    Team operations are synchronous and serialized by a single lock over the
    whole roster. Catalog fetching goes straight to the client and holds no
    lock.
    """

    def __init__(
        self,
        client: PokeApiClient | MockPokeApiClient,
        teams: Optional[Mapping[str, Sequence[Pokemon]]] = None,
        max_team_size: int = MAX_TEAM_SIZE,
    ):
        """Initialize the service.

        Args:
            client: Catalog client used by get_pokemon_list
            teams: Optional initial teams keyed by user id (for tests and
                warm starts). Copied, never aliased.
            max_team_size: Largest team a user may hold

        Raises:
            ValueError: If a seeded team is too large or repeats a Pokemon
        """
        self.client = client
        self.max_team_size = max_team_size
        self._lock = threading.Lock()
        self._user_teams: dict[str, list[Pokemon]] = {}

        for user_id, team in (teams or {}).items():
            validated = self._validated_team(user_id, team)
            if validated:
                self._user_teams[user_id] = validated

    def _validated_team(self, user_id: str, team: Sequence[Pokemon]) -> list[Pokemon]:
        if len(team) > self.max_team_size:
            raise ValueError(
                f"Team for {user_id!r} has {len(team)} Pokemon, max is {self.max_team_size}"
            )
        ids = [p.id for p in team]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Team for {user_id!r} contains duplicate Pokemon ids: {ids}")
        return list(team)

    async def get_pokemon_list(self) -> list[Pokemon]:
        """Fetch the catalog from the client.

        Errors raised by the client are not caught.
        """
        return await self.client.fetch_pokemon_list()

    def get_user_team(self, user_id: str) -> list[Pokemon]:
        """Return a copy of the user's team, empty if they have none."""
        with self._lock:
            return list(self._user_teams.get(user_id, ()))

    def toggle_pokemon_in_team(self, user_id: str, pokemon: Pokemon) -> bool:
        """Remove the Pokemon if present, otherwise add it if there is room.

        Args:
            user_id: Owner of the team
            pokemon: Pokemon to toggle, matched by id

        Returns:
            True if the team changed, False if the team was full
        """
        with self._lock:
            team = self._user_teams.get(user_id, [])

            for index, member in enumerate(team):
                if member.same_as(pokemon):
                    # Removal is always allowed, even on a full team
                    remaining = team[:index] + team[index + 1:]
                    if remaining:
                        self._user_teams[user_id] = remaining
                    else:
                        self._user_teams.pop(user_id, None)
                    return True

            if len(team) >= self.max_team_size:
                logger.info(
                    f"Team for {user_id} is full ({len(team)}/{self.max_team_size}), "
                    f"not adding {pokemon.name} (#{pokemon.id})"
                )
                return False

            self._user_teams[user_id] = team + [pokemon]
            return True

    def clear_team(self, user_id: str) -> None:
        """Empty the user's team. Unknown users are ignored."""
        with self._lock:
            self._user_teams.pop(user_id, None)

    def team_count(self) -> int:
        """Number of users currently holding a non-empty team."""
        with self._lock:
            return len(self._user_teams)
