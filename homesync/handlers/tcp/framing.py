"""Newline framing for client byte streams."""

from __future__ import annotations

from collections.abc import Iterator

from homesync.config.protocol import LINE_ENCODING, LINE_DELIMITER


class LineFramer:
    """Split an ordered stream of byte chunks into text lines.

    Partial data is buffered as bytes until its newline arrives, so chunk
    boundaries (including ones inside a multi-byte character) never change the
    decoded lines. Bytes left without a newline when the stream ends are not a
    record and are never yielded.
    """

    # TODO: cap the buffered bytes per connection and reply with an error once a record exceeds it.

    def __init__(self) -> None:
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        return bytes(self._buffer)

    def feed(self, chunk: bytes) -> Iterator[str]:
        self._buffer.extend(chunk)
        while True:
            idx = self._buffer.find(LINE_DELIMITER)
            if idx < 0:
                return
            raw = bytes(self._buffer[:idx])
            del self._buffer[: idx + 1]
            yield raw.decode(LINE_ENCODING, errors="replace")


__all__ = ["LineFramer"]
