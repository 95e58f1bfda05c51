"""Translation of format tokens through a token dictionary."""

import logging
from collections.abc import Iterable, Mapping
from typing import Final

from .dictionary import resolve_dictionary
from .errors import BadFormat, ReadFailure
from .tokenizer import Token, Tokenizer
from .types import Dictionary

log = logging.getLogger(__name__)

ERROR_HANDLERS: Final[frozenset[str]] = frozenset({"strict", "replace", "surrogateescape"})


class Translator:
    """
    Map tokens to replacement text using an exact-match dictionary.

    Tokens missing from the dictionary are emitted unchanged. The assembled
    output is stripped of surrounding whitespace.
    """

    def __init__(
        self, dictionary: Dictionary | str | None = None, errors: str | None = None
    ) -> None:
        """
        :param dictionary: Mapping, built-in dictionary name, or None for the default.
        :param errors: How to handle invalid UTF-8 in passed-through bytes:
                       "strict", "replace" or "surrogateescape". None uses
                       "surrogateescape" for text patterns, so escaped bytes
                       come back as they went in, and "replace" otherwise.
        :raises ValueError: If ``errors`` is not a supported handler.
        """
        if errors is not None and errors not in ERROR_HANDLERS:
            raise ValueError(
                f"unsupported errors handler {errors!r}, expected one of {sorted(ERROR_HANDLERS)}"
            )
        self.dictionary: Mapping[str, str] = resolve_dictionary(dictionary)
        self.errors = errors
        if not self.dictionary:
            log.warning("translating with an empty dictionary, tokens pass through")

    def translate(self, tokens: Tokenizer | Iterable[Token]) -> str:
        """
        Translate a tokenizer's output or an already materialized token sequence.

        :raises BadFormat: If reading tokens fails or the result is not valid
                           UTF-8 under ``errors="strict"``.
        """
        parts: list[bytes] = []
        try:
            for token in tokens:
                replacement = self.dictionary.get(token.text)
                if replacement is None:
                    parts.append(token.value)
                else:
                    parts.append(replacement.encode("utf-8"))
        except ReadFailure as e:
            raise BadFormat("bad format, could not read tokens") from e

        # pass-through bytes of a multi-byte character may span several tokens,
        # so decode only once everything is joined
        try:
            out = b"".join(parts).decode("utf-8", errors=self._errors_for(tokens))
        except UnicodeDecodeError as e:
            raise BadFormat("bad format, output is not valid UTF-8") from e

        log.debug(f"translated {len(parts)} tokens")
        return out.strip()

    def _errors_for(self, tokens: Tokenizer | Iterable[Token]) -> str:
        if self.errors is not None:
            return self.errors
        if isinstance(tokens, Tokenizer) and tokens.from_text:
            return "surrogateescape"
        return "replace"


def translate(
    tokens: Tokenizer | Iterable[Token], dictionary: Dictionary | str | None = None
) -> str:
    """Translate ``tokens`` with ``dictionary``; see ``Translator.translate``."""
    return Translator(dictionary).translate(tokens)


__all__ = ["Translator", "translate"]
