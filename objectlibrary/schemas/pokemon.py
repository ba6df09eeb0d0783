"""Pokédex app models: the PokeAPI list, the raw service shape, and the stored Pokémon."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from objectlibrary.helpers import first_letter_uppercased


def _display(name: str) -> str:
    return "-".join(first_letter_uppercased(part) for part in name.split("-"))


def _type_name(entry: Any) -> Any:
    """{"type": {"name": "rock"}} -> "rock"; any other shape is left for validation to reject."""
    if isinstance(entry, dict):
        nested = entry.get("type")
        if isinstance(nested, dict) and "name" in nested:
            return nested["name"]
    return entry


class PokedexEntry(BaseModel):
    """One list item returned by PokeAPI: a name and the URL holding its details."""

    name: str
    url: str

    @property
    def display_text(self) -> str:
        return _display(self.name)


class Pokedex(BaseModel):
    """Pokémon available for download. Serialized under PokeAPI's "results" key."""

    model_config = ConfigDict(populate_by_name=True)

    entries: list[PokedexEntry] = Field(default_factory=list, alias="results")


class ServicePokemon(BaseModel):
    """
    A Pokémon as returned by PokeAPI's /pokemon/{name} endpoint.
    Nested "types[*].type.name" is flattened to a list of names and
    "sprites.front_default" becomes sprite_url.
    """

    id: int
    name: str
    height: int
    types: list[str]
    sprite_url: str

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        types = data.get("types")
        if isinstance(types, list):
            data["types"] = [_type_name(t) for t in types]
        sprites = data.pop("sprites", None)
        if "sprite_url" not in data and isinstance(sprites, dict):
            data["sprite_url"] = sprites.get("front_default")
        return data


class Pokemon(BaseModel):
    """A downloaded Pokémon, sprite included. Sprite bytes are base64 in JSON."""

    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    id: int
    name: str
    height: int
    types: list[str]
    sprite: bytes

    @classmethod
    def from_service(cls, service_pokemon: ServicePokemon, sprite: bytes) -> "Pokemon":
        return cls(
            id=service_pokemon.id,
            name=service_pokemon.name,
            height=service_pokemon.height,
            types=list(service_pokemon.types),
            sprite=sprite,
        )

    @property
    def display_name(self) -> str:
        return _display(self.name)

    @property
    def display_types(self) -> str:
        """e.g. "Rock, Fighting"."""
        return ", ".join(first_letter_uppercased(t) for t in self.types)
