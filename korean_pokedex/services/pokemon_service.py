import random
from fastapi import HTTPException
from korean_pokedex.clients.pokeapi_client import PokeAPIClient
from korean_pokedex.models import LocalizedName, PokemonResponse

# National Dex ids of the first generation, inclusive on both ends
FIRST_GENERATION = (1, 151)
TARGET_LANGUAGE = "ko"

class LocalizedNameNotFoundError(HTTPException):
    def __init__(self, language: str):
        super().__init__(status_code=404, detail=f"No name found for language '{language}'.")

def draw_pokemon_id(rng) -> int:
    low, high = FIRST_GENERATION
    return rng.randint(low, high)

def select_localized_name(names: list[LocalizedName], language: str = TARGET_LANGUAGE) -> str:
    """Returns the first name whose language code equals `language` exactly."""
    match = next((entry.name for entry in names if entry.language.name == language), None)
    if match is None:
        raise LocalizedNameNotFoundError(language)
    return match

class PokemonService:
    def __init__(self, poke_client: PokeAPIClient, rng: random.Random | None = None):
        self._poke_client = poke_client
        self._rng = rng if rng is not None else random.Random()

    async def get_pokemon(self, pokemon_id: int) -> PokemonResponse:
        """
        Fetches the sprite and the species names for one id and maps them to the response model.
        The two calls run one after the other, never concurrently.
        """
        pokemon = await self._poke_client.get_pokemon(pokemon_id)
        species = await self._poke_client.get_pokemon_species(pokemon_id)

        name = select_localized_name(species.names, TARGET_LANGUAGE)

        return PokemonResponse(
            id=pokemon_id,
            sprite_url=pokemon.sprites.front_default,
            name=name,
            language=TARGET_LANGUAGE,
        )

    async def get_random_pokemon(self) -> PokemonResponse:
        # The id is drawn once and shared by both requests
        pokemon_id = draw_pokemon_id(self._rng)
        return await self.get_pokemon(pokemon_id)
