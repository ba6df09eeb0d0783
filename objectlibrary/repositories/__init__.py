"""Persistence layer: abstract interface and implementations."""

from .base import StoreProtocol
from .file_store import FileStore, directory, directory_in_user_library
from .pokedex_store import PokedexPersistence, PokemonPersistence

__all__ = [
    "StoreProtocol",
    "FileStore",
    "directory",
    "directory_in_user_library",
    "PokedexPersistence",
    "PokemonPersistence",
]
