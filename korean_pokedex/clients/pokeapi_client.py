import httpx
import logging
from typing import TypeVar
from fastapi import HTTPException
from pydantic import BaseModel, ValidationError
from korean_pokedex.models import PokemonData, PokemonSpeciesData

logger = logging.getLogger(__name__)

POKEMON_URL_TEMPLATE = "https://pokeapi.co/api/v2/pokemon/{pokemon_id}"
SPECIES_URL_TEMPLATE = "https://pokeapi.co/api/v2/pokemon-species/{pokemon_id}"

ModelT = TypeVar("ModelT", bound=BaseModel)

# Define a custom exception for client errors (Used for 5xx errors)
class APIClientError(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=f"External API Error: {detail}")

def build_url(template: str, pokemon_id: int) -> str:
    return template.format(pokemon_id=pokemon_id)

class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"
    TIMEOUT = 10.0  # seconds; expiry counts as a network error

    def __init__(self, timeout: float = TIMEOUT):
        # One client reused for both lookups
        self.client = httpx.AsyncClient(timeout=timeout)

    async def _fetch(self, url: str, pokemon_id: int) -> str:
        """Internal method to fetch a raw response body with error handling."""
        logger.info(f"Fetching {url}")

        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for any non-2xx status code
            return response.text

        except httpx.HTTPStatusError as e:
            logger.error(f"PokeAPI returned {e.response.status_code} for {url}")
            if e.response.status_code == 404:
                # Map external 404 to a standardized internal 404
                raise HTTPException(status_code=404, detail=f"Pokemon #{pokemon_id} not found.")
            # Everything else becomes a 503 Service Unavailable
            raise APIClientError(status_code=503, detail=f"PokeAPI failed with status {e.response.status_code}")
        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for {url}: {e!r}")
            raise APIClientError(status_code=503, detail=f"PokeAPI network error: {e!r}")

    @staticmethod
    def _decode(body: str, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"PokeAPI response did not match {model.__name__}: {e.error_count()} error(s)")
            raise APIClientError(status_code=503, detail="PokeAPI returned an unexpected response format.")

    async def get_pokemon(self, pokemon_id: int) -> PokemonData:
        """Fetches the Pokemon record; only the sprites are kept."""
        body = await self._fetch(build_url(POKEMON_URL_TEMPLATE, pokemon_id), pokemon_id)
        return self._decode(body, PokemonData)

    async def get_pokemon_species(self, pokemon_id: int) -> PokemonSpeciesData:
        """Fetches the species record; only the localized names are kept."""
        body = await self._fetch(build_url(SPECIES_URL_TEMPLATE, pokemon_id), pokemon_id)
        return self._decode(body, PokemonSpeciesData)

    async def close(self):
        """Close the underlying HTTP connection pool."""
        await self.client.aclose()
