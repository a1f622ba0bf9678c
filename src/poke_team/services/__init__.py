"""Business logic services."""

from poke_team.services.pokeapi_client import (
    PokeApiClient,
    MockPokeApiClient,
    get_pokeapi_client,
    parse_pokemon,
)
from poke_team.services.pokemon_service import PokemonService

__all__ = [
    "PokeApiClient",
    "MockPokeApiClient",
    "get_pokeapi_client",
    "parse_pokemon",
    "PokemonService",
]
