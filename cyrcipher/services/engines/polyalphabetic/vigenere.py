import logging
import random
from typing import Any, ClassVar

from cyrcipher.core.config import get_settings
from cyrcipher.core.exceptions import InvalidKeyError, InvalidTextError
from cyrcipher.models.schemas import CipherFamily, CipherType
from cyrcipher.services.alphabet import RUSSIAN_ALPHABET, Alphabet, require_alphabet_text
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class PolyalphabeticCipher(CipherEngine):
    """
    Keyword polyalphabetic cipher engine over the Russian alphabet.

    Each letter is shifted by the alphabet position of the matching
    keyword letter, the keyword repeating over the text (a Gronsfeld
    cipher whose digits come from a word, i.e. Vigenère over 33 letters).

    Text and keyword are case-insensitive and the output is always
    uppercase. Anything outside the 33 letters, spaces included, is
    rejected rather than passed through.
    """

    name = "Polyalphabetic Cipher"
    cipher_type = CipherType.POLYALPHABETIC
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic substitution cipher where each letter is shifted "
        "by the position of the corresponding letter of a repeating keyword, "
        "modulo the 33-letter Russian alphabet."
    )

    ALPHABET: ClassVar[Alphabet] = RUSSIAN_ALPHABET
    composes_input = True

    def __init__(self, keyword: str):
        folded = require_alphabet_text(keyword, InvalidKeyError, self.ALPHABET, what="Key")
        self._keyword = folded
        self._shifts: tuple[int, ...] = tuple(self.ALPHABET.to_positions(folded))

    @property
    def key(self) -> str:
        return self._keyword

    @property
    def shifts(self) -> tuple[int, ...]:
        """Alphabet positions of the keyword letters."""
        return self._shifts

    def encrypt(self, plaintext: str) -> str:
        """Shift each letter forward by its key letter."""
        work = self._convert(plaintext)
        size = self.ALPHABET.size
        period = len(self._shifts)

        for i in range(len(work)):
            work[i] = (work[i] + self._shifts[i % period]) % size

        logger.debug("polyalphabetic encrypt: %d letters, key length %d", len(work), period)
        return self.ALPHABET.to_text(work)

    def decrypt(self, ciphertext: str) -> str:
        """Shift each letter back by its key letter."""
        work = self._convert(ciphertext)
        size = self.ALPHABET.size
        period = len(self._shifts)

        # Adding the size keeps the operand non-negative before the modulo
        for i in range(len(work)):
            work[i] = (work[i] + size - self._shifts[i % period]) % size

        logger.debug("polyalphabetic decrypt: %d letters, key length %d", len(work), period)
        return self.ALPHABET.to_text(work)

    @classmethod
    def parse_key(cls, raw: Any) -> str:
        """Keywords are taken as-is; validation happens in the constructor."""
        if not isinstance(raw, str):
            raise InvalidKeyError(
                f"Key must be a word, got {type(raw).__name__}",
                {"key": repr(raw)},
            )
        return raw.strip()

    @classmethod
    def generate_random_key(cls) -> str:
        """Generate a random keyword within the configured length bounds."""
        settings = get_settings()
        low = settings.random_key_min_length
        high = max(low, settings.random_key_max_length)
        length = random.randint(low, high)
        return "".join(random.choice(cls.ALPHABET.letters) for _ in range(length))

    def explain(self, source: str, result: str, decrypting: bool = False) -> str:
        """Generate human-readable explanation."""
        shift_desc = ", ".join(
            f"{letter}={shift}" for letter, shift in zip(self._keyword, self._shifts)
        )
        direction = "back " if decrypting else ""

        return (
            f"Polyalphabetic cipher with keyword '{self._keyword}' "
            f"(length {len(self._keyword)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each of the {len(result)} letters is shifted {direction}by the position of the "
            f"corresponding keyword letter, modulo {self.ALPHABET.size}."
        )

    def _convert(self, text: str) -> list[int]:
        """Validate text and turn it into alphabet positions."""
        folded = require_alphabet_text(text, InvalidTextError, self.ALPHABET)
        return self.ALPHABET.to_positions(folded)
