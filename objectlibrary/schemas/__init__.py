"""Pydantic record models and plain data objects for the apps."""

from .contacts import (
    ADDRESS_FIELDS,
    CONTACT_FIELDS,
    GROUP_FIELDS,
    NAME_FIELDS,
    SECTIONS,
    Address,
    Contact,
    InputField,
)
from .pig import Die, DieChange, Player, PlayerIdentifier, Roll
from .pokemon import Pokedex, PokedexEntry, Pokemon, ServicePokemon

__all__ = [
    "ADDRESS_FIELDS",
    "CONTACT_FIELDS",
    "GROUP_FIELDS",
    "NAME_FIELDS",
    "SECTIONS",
    "Address",
    "Contact",
    "InputField",
    "Die",
    "DieChange",
    "Player",
    "PlayerIdentifier",
    "Roll",
    "Pokedex",
    "PokedexEntry",
    "Pokemon",
    "ServicePokemon",
]
