"""
Domain models and value objects.

Contains the BigInteger value type.
"""

from src.core.domain.big_integer import BigInteger
from src.core.math.decimal_codec import InvalidFormat

__all__ = [
    "BigInteger",
    "InvalidFormat",
]
