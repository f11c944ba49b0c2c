"""Reassembly of chunked Bolt protocol messages read from a byte stream."""

__version__ = "0.1.0"
__all__ = ["dechunker"]