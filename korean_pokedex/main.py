from fastapi import FastAPI, Depends, Path
from korean_pokedex.services.pokemon_service import PokemonService, FIRST_GENERATION
from korean_pokedex.dependencies import get_pokemon_service
from korean_pokedex.models import PokemonResponse

app = FastAPI(
    title="Korean Pokedex API",
    description="Sprite and Korean name of first-generation Pokemon, backed by PokeAPI.",
)

# Registered before /pokemon/{pokemon_id} so "random" is not parsed as an id
@app.get(
    "/pokemon/random",
    response_model=PokemonResponse,
    summary="Returns the sprite and Korean name of a random first-generation Pokemon",
)
async def get_random_pokemon(
    service: PokemonService = Depends(get_pokemon_service),
):
    # Errors (404, 503) are raised as HTTPExceptions by the client and the name lookup
    return await service.get_random_pokemon()


@app.get(
    "/pokemon/{pokemon_id}",
    response_model=PokemonResponse,
    summary="Returns the sprite and Korean name of the given Pokemon",
)
async def get_pokemon(
    pokemon_id: int = Path(ge=FIRST_GENERATION[0], le=FIRST_GENERATION[1]),
    service: PokemonService = Depends(get_pokemon_service),
):
    return await service.get_pokemon(pokemon_id)
