"""Polyalphabetic cipher engines."""

from cyrcipher.services.engines.polyalphabetic.vigenere import PolyalphabeticCipher

__all__ = [
    "PolyalphabeticCipher",
]
