"""DateTok: date/time format pattern tokenization and translation."""

from .dictionary import (
    STANDARD_TOKENS,
    STRICT_TOKENS,
    TokenDictionary,
    get_dictionary,
    list_dictionaries,
)
from .errors import (
    BadFormat,
    DateTokError,
    DictionaryError,
    PredicateError,
    ReadFailure,
)
from .factory import convert, convert_batch, get_tokenizer
from .predicate import (
    DEFAULT,
    STRICT,
    AdjacencyPredicate,
    CallablePredicate,
    DefaultPredicate,
    StrictPredicate,
    get_predicate,
    list_predicates,
)
from .tokenizer import Token, Tokenizer, TokenResult
from .translator import Translator, translate
from ._sanitise import render_tokens
from ._settings import set_default_dictionary, set_default_predicate

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("datetok")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Token",
    "TokenResult",
    "Tokenizer",
    "Translator",
    "AdjacencyPredicate",
    "DefaultPredicate",
    "StrictPredicate",
    "CallablePredicate",
    "DEFAULT",
    "STRICT",
    "STRICT_TOKENS",
    "STANDARD_TOKENS",
    "TokenDictionary",
    "DateTokError",
    "ReadFailure",
    "BadFormat",
    "PredicateError",
    "DictionaryError",
    "translate",
    "convert",
    "convert_batch",
    "get_tokenizer",
    "get_predicate",
    "get_dictionary",
    "list_predicates",
    "list_dictionaries",
    "render_tokens",
    "set_default_predicate",
    "set_default_dictionary",
]
