"""REST endpoints for the Pokemon catalog and user teams."""

import logging

import httpx
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from poke_team.models.pokemon import Pokemon
from poke_team.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["pokemon"])


class PokemonPayload(BaseModel):
    id: int | str
    name: str
    sprite: str = ""
    types: list[str] = Field(default_factory=list)


def _get_service(request: Request) -> PokemonService:
    return request.app.state.pokemon_service


def _serialize_team(team: list[Pokemon]) -> list[dict]:
    return [p.to_dict() for p in team]


@router.get("/pokemon")
async def list_pokemon(request: Request):
    """List the Pokemon catalog."""
    service = _get_service(request)
    try:
        pokemon = await service.get_pokemon_list()
    except (
        httpx.HTTPError,
        httpx.InvalidURL,
        ValueError,
        KeyError,
        TypeError,
        AttributeError,
    ) as e:
        logger.error(f"Failed to fetch Pokemon catalog: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    return [p.to_dict() for p in pokemon]


@router.get("/teams/{user_id}")
async def get_team(request: Request, user_id: str):
    """Get a user's team (empty if they have none)."""
    team = _get_service(request).get_user_team(user_id)
    return {"user_id": user_id, "team": _serialize_team(team)}


@router.post("/teams/{user_id}/toggle")
async def toggle_pokemon(request: Request, user_id: str, body: PokemonPayload):
    """Add the Pokemon to the user's team, or remove it if already there."""
    service = _get_service(request)
    changed = service.toggle_pokemon_in_team(user_id, Pokemon.from_dict(body.model_dump()))
    return {
        "user_id": user_id,
        "changed": changed,
        "team": _serialize_team(service.get_user_team(user_id)),
    }


@router.delete("/teams/{user_id}")
async def clear_team(request: Request, user_id: str):
    """Remove every Pokemon from the user's team."""
    service = _get_service(request)
    service.clear_team(user_id)
    return {"user_id": user_id, "team": []}
