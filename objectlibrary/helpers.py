"""Shared string helpers (display casing, search matching)."""

from typing import Iterable, Optional


def first_letter_uppercased(text: str) -> str:
    """Uppercase only the first character; the rest is left untouched."""
    return text[:1].upper() + text[1:]


def contains_all_elements(text: str, elements: Iterable[str]) -> bool:
    """True when every element is a substring of text."""
    return all(element in text for element in elements)


def list_contains_all(strings: Iterable[str], elements: Iterable[str]) -> bool:
    """True when every element is a substring of at least one of strings."""
    strings = list(strings)
    return all(any(element in s for s in strings) for element in elements)


def compact_lowercased(values: Iterable[Optional[str]]) -> list[str]:
    """Drop None values and lowercase the rest."""
    return [v.lower() for v in values if v is not None]
