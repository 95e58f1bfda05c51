"""
Token dictionaries mapping human-friendly format tokens to Go reference-time layouts.

Keys are matched exactly and case-sensitively against whole token text.
Tokens without an entry are passed through unchanged, so separators such
as ``-``, ``/``, ``:`` and spaces never need to be listed.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from ._settings import default_dictionary_name
from .errors import DictionaryError
from .types import Dictionary


def _fractions(token: str) -> dict[str, str]:
    """Fractional second runs of one to nine characters, each mapped to as many 9s."""
    return {token * n: "9" * n for n in range(1, 10)}


# Strict has very few options
STRICT_TOKENS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "YY": "06",
        "YYYY": "2006",
        "M": "1",
        "MM": "01",
        "MMM": "Jan",
        "MMMM": "January",
        "D": "2",
        "DD": "02",
        "HH": "15",
        "hh": "03",
        "mm": "04",
        "ss": "05",
        **_fractions("f"),
        "A": "PM",
        "a": "pm",
        "z": "-07",
        "zz": "-0700",
        "zzz": "-7:00",
        "Z": "-07",
        "ZZ": "-0700",
        "ZZZ": "-7:00",
    }
)

# Standard covers case variants produced by the default predicate
STANDARD_TOKENS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "yyyy": "2006",
        "yy": "06",
        "YYYY": "2006",
        "YY": "06",
        "Yyyy": "2006",
        "Yy": "06",
        "M": "1",
        "MM": "01",
        "MMM": "Jan",
        "Mmm": "Jan",
        "mmm": "Jan",
        "MMMM": "January",
        "Mmmm": "January",
        "mmmm": "January",
        "D": "2",
        "DD": "02",
        "Dd": "02",
        "d": "2",
        "dd": "02",
        "h": "3",
        "H": "3",
        "hh": "03",
        "HH": "15",
        "Hh": "15",
        "m": "4",
        "mm": "04",
        "s": "5",
        "ss": "05",
        "S": "5",
        "SS": "05",
        "Ss": "05",
        **_fractions("f"),
        **_fractions("F"),
        # "F" followed by lowercase "f" runs, "Ff" through "Fffffffff"
        **{"F" + "f" * n: "9" * (n + 1) for n in range(1, 9)},
        "A": "PM",
        "a": "pm",
        "z": "-07",
        "zz": "-0700",
        "zzz": "-7:00",
        "Z": "-07",
        "ZZ": "-0700",
        "ZZZ": "-7:00",
        "Zz": "-0700",
        "Zzz": "-7:00",
        "O": "MST",
        "o": "mst",
        "Day": "Monday",
    }
)


class TokenDictionary(str, Enum):
    """Names of the built-in token dictionaries."""

    STRICT = "strict"
    STANDARD = "standard"

    @property
    def tokens(self) -> Mapping[str, str]:
        """Return the mapping registered under this name."""
        return _DICTIONARIES[self]

    @classmethod
    def get(cls, name: str) -> Mapping[str, str]:
        """Get a built-in dictionary by name (case-insensitive)."""
        try:
            return cls[name.upper().replace("-", "_")].tokens
        except KeyError:
            raise DictionaryError(
                "unknown dictionary name",
                invalid_name=name,
                available=list_dictionaries(),
            )


_DICTIONARIES: Final[dict[TokenDictionary, Mapping[str, str]]] = {
    TokenDictionary.STRICT: STRICT_TOKENS,
    TokenDictionary.STANDARD: STANDARD_TOKENS,
}


def list_dictionaries() -> list[str]:
    """Return names of all built-in dictionaries."""
    return [d.value for d in TokenDictionary]


def get_dictionary(name: str) -> Mapping[str, str]:
    return TokenDictionary.get(name)


def resolve_dictionary(dictionary: Dictionary | str | None) -> Mapping[str, str]:
    """
    Coerce a dictionary name or mapping into a validated mapping.

    ``None`` selects the configured default dictionary.

    :raises DictionaryError: If the name is unknown or a key or value is not a string.
    """
    if dictionary is None:
        return get_dictionary(default_dictionary_name())
    if isinstance(dictionary, str):
        return get_dictionary(dictionary)
    if not isinstance(dictionary, Mapping):
        raise DictionaryError(
            f"dictionary must be a mapping, got {type(dictionary).__name__}"
        )
    # built-ins are known to be well formed
    if dictionary is STRICT_TOKENS or dictionary is STANDARD_TOKENS:
        return dictionary
    for key, value in dictionary.items():
        if not isinstance(key, str):
            raise DictionaryError("dictionary keys must be strings", invalid_key=key)
        if not isinstance(value, str):
            raise DictionaryError(
                "dictionary values must be strings", invalid_value=value
            )
    return dictionary


__all__ = [
    "STRICT_TOKENS",
    "STANDARD_TOKENS",
    "TokenDictionary",
    "list_dictionaries",
    "get_dictionary",
    "resolve_dictionary",
]
