"""Command line entry point: print one random Pokemon's sprite URL and Korean name.

Standard output receives exactly two lines on success. Any failure (network,
HTTP status, response format, missing Korean name) is logged to stderr and
the process exits with status 1 without printing a result.
"""
import asyncio
import logging
import sys
from fastapi import HTTPException
from korean_pokedex.clients import PokeAPIClient
from korean_pokedex.models import PokemonResponse
from korean_pokedex.services import PokemonService

logger = logging.getLogger(__name__)

async def fetch_random_pokemon(rng=None) -> PokemonResponse:
    poke_client = PokeAPIClient()
    try:
        return await PokemonService(poke_client=poke_client, rng=rng).get_random_pokemon()
    finally:
        await poke_client.close()

def present(pokemon: PokemonResponse, out=None):
    print(pokemon.sprite_url, file=out)
    print(pokemon.name, file=out)

def main(rng=None) -> int:
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        pokemon = asyncio.run(fetch_random_pokemon(rng))
    except HTTPException as e:
        logger.error(f"Run aborted ({e.status_code}): {e.detail}")
        return 1

    present(pokemon)
    return 0
