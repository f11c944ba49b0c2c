"""Reassembly of chunked Bolt messages read from a byte stream."""

from __future__ import annotations

import struct
from typing import BinaryIO, Iterator

_HEADER = struct.Struct(">H")


class IncompleteChunkError(EOFError):
    """The stream ended in the middle of a message."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = b""
    while len(data) < size:
        part = stream.read(size - len(data))
        if not part:
            break
        data += part
    return data


def dechunk_message(stream: BinaryIO) -> bytes:
    """Read one message, skipping leading no-op chunks, and return its payload.

    Raises EOFError if the stream ends before a message starts and
    IncompleteChunkError if it ends part way through one.
    """
    message = bytearray()
    while True:
        header = _read_exact(stream, _HEADER.size)
        if len(header) < _HEADER.size:
            if header or message:
                raise IncompleteChunkError("stream ended inside a message")
            raise EOFError("stream ended before a message started")
        (size,) = _HEADER.unpack(header)
        if size == 0:
            if message:
                return bytes(message)
            continue
        chunk = _read_exact(stream, size)
        if len(chunk) < size:
            raise IncompleteChunkError(f"expected {size} chunk bytes, got {len(chunk)}")
        message += chunk


def iter_messages(stream: BinaryIO) -> Iterator[bytes]:
    """Yield messages until the stream ends cleanly between messages."""
    while True:
        try:
            message = dechunk_message(stream)
        except EOFError as exc:
            if isinstance(exc, IncompleteChunkError):
                raise
            return
        yield message