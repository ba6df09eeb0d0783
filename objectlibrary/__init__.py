"""
ObjectLibrary: model objects, a JSON file store and a GET client
shared by the Contacts, Pig and Pokédex apps.
"""

from objectlibrary.repositories import FileStore, PokedexPersistence, PokemonPersistence
from objectlibrary.services import (
    PokeAPI,
    Result,
    ServiceCallError,
    ServiceCallResult,
    ServiceClient,
    url,
)

__version__ = "1.0.0"

__all__ = [
    "FileStore",
    "PokedexPersistence",
    "PokemonPersistence",
    "PokeAPI",
    "Result",
    "ServiceCallError",
    "ServiceCallResult",
    "ServiceClient",
    "url",
]
