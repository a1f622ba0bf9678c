"""PokeAPI client for fetching the Pokemon catalog.

Provides both a real implementation (using the public PokeAPI) and a mock
for testing/development.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from poke_team.models.pokemon import Pokemon

logger = logging.getLogger(__name__)


class MockPokeApiClient:
    """Mock PokeAPI client with a hardcoded catalog.

    Use this for testing and development when you don't want network access.
    """

    POKEMON = [
        Pokemon(id=1, name="Bulbasaur", sprite="bulbasaur.png", types=("Grass", "Poison")),
        Pokemon(id=4, name="Charmander", sprite="charmander.png", types=("Fire",)),
        Pokemon(id=7, name="Squirtle", sprite="squirtle.png", types=("Water",)),
        Pokemon(id=25, name="Pikachu", sprite="pikachu.png", types=("Electric",)),
        Pokemon(id=133, name="Eevee", sprite="eevee.png", types=("Normal",)),
        Pokemon(id=143, name="Snorlax", sprite="snorlax.png", types=("Normal",)),
        Pokemon(id=150, name="Mewtwo", sprite="mewtwo.png", types=("Psychic",)),
    ]

    async def fetch_pokemon_list(self) -> list[Pokemon]:
        """Return the hardcoded catalog."""
        logger.info(f"MockPokeApi: Returning {len(self.POKEMON)} hardcoded Pokemon")
        return list(self.POKEMON)

    async def close(self):
        """Nothing to release."""


class PokeApiClient:
    """Client for the public PokeAPI (https://pokeapi.co).

    Failures are not caught here: HTTP status errors, transport errors and
    malformed payloads reach the caller unchanged.
    """

    DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        limit: int = 151,
        timeout: float = 10.0,
        max_concurrency: int = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the PokeAPI client.

        Args:
            base_url: API root, without trailing slash
            limit: Number of Pokemon to request from the list endpoint
            timeout: Request timeout in seconds
            max_concurrency: Most detail requests in flight at once
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.limit = limit
        self.timeout = timeout
        self.max_concurrency = max_concurrency
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _get_json(self, url: str, params: Optional[dict] = None) -> Any:
        client = await self._get_client()
        response = await client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def fetch_pokemon_list(self) -> list[Pokemon]:
        """Fetch the first ``limit`` Pokemon with their sprites and types.

        Returns:
            Pokemon in the order the list endpoint returned them
        """
        listing = await self._get_json(
            f"{self.base_url}/pokemon",
            params={"limit": self.limit, "offset": 0},
        )
        urls = [result["url"] for result in listing.get("results", [])]

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def fetch_detail(url: str) -> Any:
            async with semaphore:
                return await self._get_json(url)

        tasks = [asyncio.ensure_future(fetch_detail(url)) for url in urls]
        try:
            details = await asyncio.gather(*tasks)
        except BaseException:
            # First failure wins; stop the requests still in flight
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return [parse_pokemon(detail) for detail in details]


def parse_pokemon(data: dict[str, Any]) -> Pokemon:
    """Map a PokeAPI ``/pokemon/{id}`` payload onto a Pokemon."""
    slots = sorted(data.get("types", []), key=lambda t: t.get("slot", 0))
    sprites = data.get("sprites") or {}
    return Pokemon(
        id=data["id"],
        name=data["name"].capitalize(),
        sprite=sprites.get("front_default") or "",
        types=tuple(slot["type"]["name"].capitalize() for slot in slots),
    )


def get_pokeapi_client(
    base_url: Optional[str] = None,
    limit: int = 151,
    timeout: float = 10.0,
    max_concurrency: int = 10,
    use_mock: bool = False,
) -> MockPokeApiClient | PokeApiClient:
    """Factory function to get appropriate catalog client.

    Args:
        base_url: PokeAPI root URL (defaults to the public API)
        limit: Number of Pokemon to fetch
        timeout: Request timeout in seconds
        max_concurrency: Most detail requests in flight at once
        use_mock: Force use of mock client

    Returns:
        PokeApiClient or MockPokeApiClient
    """
    if use_mock:
        logger.info("Using MockPokeApiClient")
        return MockPokeApiClient()
    logger.info(f"Using real PokeApiClient ({base_url or PokeApiClient.DEFAULT_BASE_URL})")
    return PokeApiClient(
        base_url=base_url or PokeApiClient.DEFAULT_BASE_URL,
        limit=limit,
        timeout=timeout,
        max_concurrency=max_concurrency,
    )
