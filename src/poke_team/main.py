"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from poke_team.config import settings
from poke_team.api.routes.pokemon import router as pokemon_router
from poke_team.services.pokeapi_client import get_pokeapi_client
from poke_team.services.pokemon_service import PokemonService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: build the catalog client and the process-wide roster
    if not hasattr(app.state, "pokemon_service"):
        client = get_pokeapi_client(
            base_url=settings.pokeapi_base_url,
            limit=settings.pokemon_limit,
            timeout=settings.pokeapi_timeout,
            max_concurrency=settings.pokeapi_max_concurrency,
            use_mock=settings.use_mock_catalog,
        )
        app.state.pokemon_service = PokemonService(client)
    yield
    # Shutdown: release the HTTP client
    await app.state.pokemon_service.client.close()


app = FastAPI(
    title="Poke Team",
    description="Pokemon team builder - pick up to six Pokemon per user",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "poke-team"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Poke Team API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(pokemon_router)


def run():
    """Serve the app with uvicorn using host/port from settings."""
    uvicorn.run(
        "poke_team.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
