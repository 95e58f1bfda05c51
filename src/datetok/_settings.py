import os

_predicate: str = "default"
_dictionary: str = "standard"


def set_default_predicate(name: str) -> None:
    """Set the predicate name used when a tokenizer is created without one."""
    global _predicate
    _predicate = name


def set_default_dictionary(name: str) -> None:
    """Set the dictionary name used when translating without one."""
    global _dictionary
    _dictionary = name


def default_predicate_name() -> str:
    """Return the default predicate name (respects env var override)."""
    return os.environ.get("DATETOK_PREDICATE", "").strip().lower() or _predicate


def default_dictionary_name() -> str:
    """Return the default dictionary name (respects env var override)."""
    return os.environ.get("DATETOK_DICTIONARY", "").strip().lower() or _dictionary
