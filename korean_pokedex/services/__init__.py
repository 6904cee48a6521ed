"""Service layer: id selection, name lookup and response mapping."""
from .pokemon_service import PokemonService, LocalizedNameNotFoundError

__all__ = [
    'PokemonService',
    'LocalizedNameNotFoundError'
]
