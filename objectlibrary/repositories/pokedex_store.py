"""File-backed persistence for the Pokédex app."""

import logging
from pathlib import Path
from typing import Optional

from objectlibrary.repositories.file_store import FileStore, directory, directory_in_user_library
from objectlibrary.schemas.pokemon import Pokedex, Pokemon

logger = logging.getLogger(__name__)


def _resolve(directory_name: str, base_dir: Optional[Path]) -> Path:
    if base_dir is None:
        return directory_in_user_library(directory_name)
    return directory(base_dir, directory_name)


class PokedexPersistence(FileStore[Pokedex]):
    """Stores the single downloaded Pokédex list."""

    IDENTIFIER = "Pokédex"

    def __init__(self, directory_name: str, base_dir: Optional[Path] = None):
        super().__init__(_resolve(directory_name, base_dir), Pokedex)

    @property
    def pokedex(self) -> Optional[Pokedex]:
        """The stored Pokédex, if one exists."""
        files = self.files
        return self.read_file(files[0]) if files else None

    def save(self, pokedex: Pokedex, id: Optional[str] = None) -> bool:
        saved = super().save(pokedex, id or self.IDENTIFIER)
        if saved:
            logger.info("Saved Pokédex with %d entries", len(pokedex.entries))
        return saved


class PokemonPersistence(FileStore[Pokemon]):
    """One file per downloaded Pokémon, named after the Pokémon."""

    def __init__(self, directory_name: str, base_dir: Optional[Path] = None):
        super().__init__(_resolve(directory_name, base_dir), Pokemon)

    def save(self, pokemon: Pokemon, id: Optional[str] = None) -> bool:
        return super().save(pokemon, id or pokemon.name)

    @property
    def pokemon(self) -> list[Pokemon]:
        """Every readable stored Pokémon, sorted by id."""
        stored = (self.read_file(p) for p in self.files)
        return sorted((p for p in stored if p is not None), key=lambda p: p.id)
