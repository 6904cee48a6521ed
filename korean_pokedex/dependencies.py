import random
from korean_pokedex.clients import PokeAPIClient
from korean_pokedex.services import PokemonService
from fastapi import Depends

_poke_client = None
_rng = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_rng() -> random.Random:
    global _rng
    if _rng is None:
        _rng = random.Random()
    return _rng

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    rng: random.Random = Depends(get_rng),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, rng=rng)
