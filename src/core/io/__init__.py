"""
Stream I/O для BigInteger.
"""

from src.core.io.streams import read_big_integer, read_token, write_big_integer

__all__ = [
    "read_big_integer",
    "read_token",
    "write_big_integer",
]
