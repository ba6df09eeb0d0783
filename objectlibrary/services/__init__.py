"""Network services: GET client, URL building and the PokeAPI layer."""

from .pokeapi import PokeAPI, PokedexResult, PokemonResult
from .service_client import (
    Result,
    ServiceCallError,
    ServiceCallResult,
    ServiceClient,
    handle_response,
    reason_phrase,
)
from .url_provider import url

__all__ = [
    "PokeAPI",
    "PokedexResult",
    "PokemonResult",
    "Result",
    "ServiceCallError",
    "ServiceCallResult",
    "ServiceClient",
    "handle_response",
    "reason_phrase",
    "url",
]
