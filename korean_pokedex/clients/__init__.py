"""Client modules for external API communication."""
from .pokeapi_client import PokeAPIClient, APIClientError, build_url

__all__ = [
    'PokeAPIClient',
    'APIClientError',
    'build_url'
]
