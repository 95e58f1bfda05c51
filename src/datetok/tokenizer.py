"""
Single-pass tokenizer splitting a format pattern into runs of related bytes.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from typing_extensions import deprecated

from ._sanitise import render_bytes
from ._source import ByteSource, Source
from .predicate import END_OF_INPUT, AdjacencyPredicate, resolve_predicate
from .types import Byte, PredicateFunc

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Token:
    """A maximal run of input bytes that translates as one unit."""

    # exact bytes consumed, never normalized
    value: bytes
    # byte index of the first byte within the input
    offset: int = 0

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def text(self) -> str:
        """Token bytes as a lookup key; undecodable bytes are kept as surrogate escapes."""
        return self.value.decode("utf-8", errors="surrogateescape")

    def __str__(self) -> str:
        return render_bytes(self.value)


class TokenResult(NamedTuple):
    """
    Outcome of one ``Tokenizer.next_token()`` call.

    The final token of a stream arrives with ``end_of_input`` already set.
    Once the stream is drained, ``token`` is None.
    """

    token: Token | None
    end_of_input: bool


@dataclass(slots=True)
class ScanState:
    """Mutable scan position owned by a single tokenizer."""

    previous: Byte = END_OF_INPUT
    current: Byte = END_OF_INPUT
    # None once a peek found no further byte
    peeked: Byte | None = None
    # number of bytes consumed so far
    index: int = 0
    at_end: bool = False

    @property
    def next(self) -> Byte:
        """Lookahead byte as seen by predicates, with the end-of-input sentinel."""
        return END_OF_INPUT if self.peeked is None else self.peeked


class Tokenizer:
    """
    Group the bytes of a format pattern into tokens.

    Each byte is compared with the byte after it using an adjacency
    predicate. While the predicate says the next byte continues the current
    token the run grows; otherwise the token is closed. Only one byte of
    lookahead is ever used and no decision is revisited.

    .. code-block:: python

        tok = Tokenizer("YYYY-MM-DD")
        [t.text for t in tok.read_all()]  # ['YYYY', '-', 'MM', '-', 'DD']
    """

    def __init__(
        self,
        source: Source,
        predicate: AdjacencyPredicate | PredicateFunc | str | None = None,
    ) -> None:
        """
        :param source: Pattern as str, bytes or a readable stream.
        :param predicate: Predicate instance, plain function or registered name.
                          Defaults to the configured default predicate.
        """
        self._source = ByteSource(source)
        self._predicate = resolve_predicate(predicate)
        self._state = ScanState()
        # set once a read found the source exhausted
        self._drained = False

    @property
    def from_text(self) -> bool:
        """True if the pattern was given as text rather than bytes."""
        return self._source.from_text

    @property
    def predicate(self) -> AdjacencyPredicate:
        return self._predicate

    @predicate.setter
    def predicate(self, predicate: AdjacencyPredicate | PredicateFunc | str) -> None:
        self._predicate = resolve_predicate(predicate)

    def set_predicate(self, predicate: AdjacencyPredicate | PredicateFunc | str) -> None:
        """Swap the adjacency predicate; affects tokens not yet read."""
        self.predicate = predicate

    def advance(self) -> bool:
        """
        Consume one byte into the scan state and peek the byte after it.

        :returns: False if the source had no byte left to consume.
        :raises ReadFailure: If the source fails while reading or peeking.
        """
        b = self._source.read_byte()
        if b is None:
            return False

        state = self._state
        state.previous = state.current
        state.current = b
        state.index += 1

        # end of input is detected one byte ahead, through the peek
        if not state.at_end:
            state.peeked = self._source.peek_byte()
            if state.peeked is None:
                state.at_end = True
        return True

    def next_token(self) -> TokenResult:
        """
        Read the next token.

        :returns: The token and whether the input is exhausted. The last token
                  is returned together with ``end_of_input=True``; further calls
                  return ``TokenResult(None, True)``.
        :raises ReadFailure: If the source fails mid-scan.
        """
        if self._drained:
            return TokenResult(None, True)

        state = self._state
        start = state.index
        buf = bytearray()
        while True:
            if not self.advance():
                self._drained = True
                return self._close(buf, start, end_of_input=True)

            buf.append(state.current)

            if not self._predicate.continues(state.current, state.next):
                if state.at_end:
                    self._drained = True
                return self._close(buf, start, end_of_input=state.at_end)

    def _close(self, buf: bytearray, start: int, end_of_input: bool) -> TokenResult:
        """Finalize the in-progress token; an empty run yields no token."""
        if not buf:
            return TokenResult(None, end_of_input)
        return TokenResult(Token(bytes(buf), start), end_of_input)

    def read_all(self) -> list[Token]:
        """
        Drain the source and return every remaining token in order.

        :raises ReadFailure: If the source fails; no partial result is returned.
        """
        tokens: list[Token] = []
        while True:
            token, end_of_input = self.next_token()
            if token is not None:
                tokens.append(token)
            if end_of_input:
                break
        log.debug(f"read {len(tokens)} tokens from {self._state.index} bytes")
        return tokens

    @deprecated("Use `Tokenizer.read_all()` instead.")
    def read_tokens(self) -> list[Token]:
        return self.read_all()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token, end_of_input = self.next_token()
            if token is not None:
                yield token
            if end_of_input:
                return


__all__ = ["Token", "TokenResult", "ScanState", "Tokenizer"]
