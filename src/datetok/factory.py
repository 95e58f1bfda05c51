"""Factory and convenience functions for tokenizing and translating patterns."""

from collections.abc import Iterable
from typing import TypeAlias

from ._decorators import log_elapsed
from ._source import Source
from .predicate import AdjacencyPredicate
from .tokenizer import Tokenizer
from .translator import Translator
from .types import Dictionary, PredicateFunc

PredicateLike: TypeAlias = AdjacencyPredicate | PredicateFunc | str | None


def get_tokenizer(source: Source, predicate: PredicateLike = None) -> Tokenizer:
    """
    Create a tokenizer over ``source``.

    :param source: Pattern as str, bytes or a readable stream.
    :param predicate: Predicate instance, plain function, or name
                      ("default", "strict"). None uses the configured default.
    :raises PredicateError: If the predicate name is unknown.

    .. code-block:: python

        tok = get_tokenizer("Yyyy-Dd", predicate="strict")
        [t.text for t in tok.read_all()]  # ['Y', 'yyy', '-', 'D', 'd']
    """
    return Tokenizer(source, predicate)


def convert(
    pattern: Source,
    dictionary: Dictionary | str | None = None,
    predicate: PredicateLike = None,
) -> str:
    """
    Translate one format pattern.

    :param pattern: Pattern as str, bytes or a readable stream.
    :param dictionary: Mapping or built-in name ("standard", "strict").
                       None uses the configured default.
    :param predicate: See ``get_tokenizer``.
    :return: The translated pattern with surrounding whitespace removed.
    :raises BadFormat: If the pattern source cannot be read.

    .. code-block:: python

        convert("YYYY-MM-dd HH:mm:ss")  # '2006-01-02 15:04:05'
    """
    return Translator(dictionary).translate(get_tokenizer(pattern, predicate))


@log_elapsed
def convert_batch(
    patterns: Iterable[Source],
    dictionary: Dictionary | str | None = None,
    predicate: PredicateLike = None,
) -> list[str]:
    """Translate many patterns with one dictionary, preserving input order."""
    translator = Translator(dictionary)
    return [translator.translate(get_tokenizer(p, predicate)) for p in patterns]


__all__ = ["get_tokenizer", "convert", "convert_batch"]
