"""Transposition cipher engines."""

from cyrcipher.services.engines.transposition.route import RouteTranspositionCipher

__all__ = [
    "RouteTranspositionCipher",
]
