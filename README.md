# boltframes

Bolt protocol messages travel as a sequence of chunks. Each chunk begins
with a two-byte big-endian length and is followed by that many bytes of
data. A chunk of length zero ends the message. A zero-length chunk that
arrives before any data of a message is a no-op keep-alive, and it is
skipped.

`boltframes` reads such a stream and gives back whole messages as `bytes`.

## Installation

```
pip install boltframes
```

## Usage

Read one message from any binary file-like object with a `read` method,
such as a socket file or `io.BytesIO`:

```python
import io
from boltframes.dechunker import dechunk_message

stream = io.BytesIO(b"\x00\x00\x00\x03abc\x00\x02de\x00\x00")
assert dechunk_message(stream) == b"abcde"
```

Short reads are retried until the requested number of bytes arrives or
the stream reports end of data.

Iterate over every message until the stream ends cleanly:

```python
import io
from boltframes.dechunker import iter_messages

stream = io.BytesIO(b"\x00\x02hi\x00\x00\x00\x03you\x00\x00")
assert list(iter_messages(stream)) == [b"hi", b"you"]
```

## Errors

`dechunk_message` raises:

- `EOFError` when the stream ends before a message starts (including
  after nothing but no-op chunks);
- `IncompleteChunkError`, a subclass of `EOFError`, when the stream ends
  partway through a chunk header, partway through a chunk body, or after
  some chunk data but before the terminating zero-length chunk.

`iter_messages` stops quietly on a plain `EOFError` and lets
`IncompleteChunkError` propagate, so iteration ends without an error only
when the stream ends exactly on a message boundary.

## What it does not do

The package only reads. It does not split messages into chunks for
sending, open connections, perform a handshake, or decode the contents
of a message; the payload bytes are returned as they arrived.

## Running the tests

```
pip install -e ".[test]"
pytest
```