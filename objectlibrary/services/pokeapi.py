"""
PokeAPI access for the Pokédex app.
Fetches the Pokédex list, a Pokémon's details and its sprite, and decodes
them into schemas. Failures come back as Result errors, never raised.
"""
import logging
import threading
from functools import partial
from typing import Optional, Union

from pydantic import ValidationError

from objectlibrary.config import get_settings
from objectlibrary.schemas.pokemon import Pokedex, PokedexEntry, Pokemon, ServicePokemon
from objectlibrary.services.service_client import (
    Completion,
    Result,
    ServiceCallError,
    ServiceClient,
    dispatch,
)
from objectlibrary.services.url_provider import url

logger = logging.getLogger(__name__)

DECODE_FAILED = "Could not decode response"
DEFAULT_LIMIT = 964

PokedexResult = Result[Pokedex]
PokemonResult = Result[Pokemon]


def _decode(model, data: bytes) -> Result:
    try:
        return Result.success(model.model_validate_json(data))
    except ValidationError as e:
        logger.warning("Could not decode %s: %s", model.__name__, e.error_count())
        return Result.failure(ServiceCallError(DECODE_FAILED))


class PokeAPI:
    def __init__(self, client: Optional[ServiceClient] = None, base_url: Optional[str] = None):
        self.client = client or ServiceClient()
        self.base_url = (base_url or get_settings().POKEAPI_BASE_URL).rstrip("/")

    def pokedex_url(self, offset: int = 0, limit: int = DEFAULT_LIMIT) -> str:
        return url(self.base_url, ["pokemon"], {"offset": str(offset), "limit": str(limit)})

    def pokedex(self, offset: int = 0, limit: int = DEFAULT_LIMIT) -> PokedexResult:
        result = self.client.fetch(self.pokedex_url(offset, limit))
        if not result.ok:
            return Result.failure(result.error)
        return _decode(Pokedex, result.data)

    def pokemon(self, entry: Union[PokedexEntry, str]) -> PokemonResult:
        """Fetch a Pokémon's details, then its sprite, and combine them."""
        entry_url = entry.url if isinstance(entry, PokedexEntry) else entry
        result = self.client.fetch(entry_url)
        if not result.ok:
            return Result.failure(result.error)

        decoded = _decode(ServicePokemon, result.data)
        if not decoded.ok:
            return Result.failure(decoded.error)
        service_pokemon = decoded.data

        sprite = self.client.fetch(service_pokemon.sprite_url)
        if not sprite.ok:
            logger.info("Sprite download failed for %s: %s", service_pokemon.name, sprite.error.message)
            return Result.failure(sprite.error)
        return Result.success(Pokemon.from_service(service_pokemon, sprite.data))

    def get_pokedex(
        self, completion: Completion, offset: int = 0, limit: int = DEFAULT_LIMIT
    ) -> threading.Thread:
        return dispatch(partial(self.pokedex, offset, limit), completion)

    def get_pokemon(self, entry: Union[PokedexEntry, str], completion: Completion) -> threading.Thread:
        return dispatch(partial(self.pokemon, entry), completion)
