"""
Byte source with one byte of lookahead over strings, bytes and readable streams.
"""

import logging
from typing import Final, Protocol, TypeAlias

from .errors import ReadFailure
from .types import Byte

CHUNK_SIZE: Final[int] = 4096

log = logging.getLogger(__name__)


class Readable(Protocol):
    def read(self, size: int = -1, /) -> bytes | str: ...


Source: TypeAlias = str | bytes | bytearray | memoryview | Readable


class ByteSource:
    """
    Forward-only reader that yields one byte at a time and can peek one ahead.

    In-memory inputs are consumed directly. Streams are read in chunks. Text,
    whether a ``str`` or chunks from a text stream, is UTF-8 encoded as it is
    read, with ``surrogateescape`` so escaped bytes survive; ``from_text`` is
    set once any text has been seen. ``OSError`` and ``ValueError`` from the
    stream, and text that cannot be encoded, are re-raised as ``ReadFailure``.
    Other exceptions propagate unchanged.
    """

    def __init__(self, source: Source, chunk_size: int = CHUNK_SIZE) -> None:
        self._stream: Readable | None = None
        self._buf: bytes = b""
        self._pos: int = 0
        # total bytes handed out, used to report failure positions
        self._consumed: int = 0
        self._chunk_size = max(1, chunk_size)
        # str input waiting to be encoded on first read
        self._text: str | None = None
        self.from_text: bool = False

        if isinstance(source, str):
            self._text = source
            self.from_text = True
        elif isinstance(source, (bytes, bytearray, memoryview)):
            self._buf = bytes(source)
        elif hasattr(source, "read"):
            self._stream = source
        else:
            raise TypeError(
                f"expected str, bytes or a readable stream, got {type(source).__name__}"
            )

    def read_byte(self) -> Byte | None:
        """Consume and return the next byte, or None once the source is exhausted."""
        if not self._fill():
            return None
        b = self._buf[self._pos]
        self._pos += 1
        self._consumed += 1
        return b

    def peek_byte(self) -> Byte | None:
        """Return the next byte without consuming it, or None at end of input."""
        if not self._fill():
            return None
        return self._buf[self._pos]

    def _fill(self) -> bool:
        """Ensure at least one unread byte is buffered; return False at end of input."""
        if self._pos < len(self._buf):
            return True
        if self._text is not None:
            text, self._text = self._text, None
            self._buf = self._encode(text)
            self._pos = 0
            return bool(self._buf)
        if self._stream is None:
            return False

        try:
            chunk = self._stream.read(self._chunk_size)
        except (OSError, ValueError) as e:
            raise ReadFailure(
                f"failed to read format source: {e}", position=self._consumed
            ) from e

        if not chunk:
            # stream exhausted: drop the reference so later calls stay cheap
            log.debug(f"source exhausted after {self._consumed} bytes")
            self._stream = None
            return False

        if isinstance(chunk, str):
            self.from_text = True
            chunk = self._encode(chunk)
        self._buf = bytes(chunk)
        self._pos = 0
        return True

    def _encode(self, text: str) -> bytes:
        try:
            return text.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError as e:
            # everything before the failing character encodes cleanly
            good = len(text[: e.start].encode("utf-8", errors="surrogateescape"))
            raise ReadFailure(
                f"format source is not encodable as UTF-8: {e.reason}",
                position=self._consumed + good,
            ) from e
