from pydantic import BaseModel, ConfigDict

# Partial views of the raw PokeAPI payloads (Internal Contract).
# Only the fields we read are declared; everything else in the payload is dropped.

class Sprites(BaseModel):
    model_config = ConfigDict(extra="ignore")

    front_default: str

class PokemonData(BaseModel):
    """Partial view of /pokemon/{id}."""
    model_config = ConfigDict(extra="ignore")

    sprites: Sprites

class Language(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str  # language code, e.g. "ko", "en"

class LocalizedName(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    language: Language

class PokemonSpeciesData(BaseModel):
    """Partial view of /pokemon-species/{id}."""
    model_config = ConfigDict(extra="ignore")

    names: list[LocalizedName]

# Model for the final result (CLI output and public API response)
class PokemonResponse(BaseModel):
    id: int
    sprite_url: str
    name: str
    language: str
