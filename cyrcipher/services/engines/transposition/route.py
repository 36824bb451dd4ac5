import logging
import math
import random
from typing import Any, ClassVar

from cyrcipher.core.exceptions import InvalidKeyError, InvalidTextError
from cyrcipher.models.schemas import CipherFamily, CipherType
from cyrcipher.services.alphabet import require_non_empty
from cyrcipher.services.engines.base import CipherEngine
from cyrcipher.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@EngineRegistry.register
class RouteTranspositionCipher(CipherEngine):
    """
    Route (table) transposition cipher engine.

    The text is written into a grid row by row, with the key as the
    number of columns, then read out column by column. Missing cells
    in the last row are filled with spaces, so the ciphertext is
    always a whole number of rows long.

    Example with key 5:

            p R O c e
            S s I n g

    Read columns top to bottom: pS Rs OI cn eg -> "pSRsOIcneg"

    Decryption writes the ciphertext back column by column and reads
    the rows. The padding spaces are part of the result.
    """

    name = "Route Transposition Cipher"
    cipher_type = CipherType.ROUTE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where the text is written into a table "
        "row by row and read out column by column. The key is the number "
        "of columns; short tables are padded with spaces."
    )

    PAD: ClassVar[str] = " "

    def __init__(self, key: int):
        if isinstance(key, bool) or not isinstance(key, int):
            raise InvalidKeyError(
                "Key must be an integer",
                {"key": repr(key)},
            )
        if key <= 0:
            raise InvalidKeyError(
                f"Key must be a positive number of columns, got {key}",
                {"key": key},
            )
        self._key = key

    @property
    def key(self) -> int:
        return self._key

    def rows_for(self, length: int) -> int:
        """Number of grid rows needed for ``length`` characters."""
        return math.ceil(length / self._key)

    def encode(self, text: str) -> str:
        """Write rows, read columns."""
        require_non_empty(text, InvalidTextError)
        self._warn_if_wider(text)

        rows = self.rows_for(len(text))
        grid = self._fill_rows(text, rows)
        result = self._read_columns(grid, rows)

        logger.debug(
            "route encode: %d chars, key=%d, grid %dx%d", len(text), self._key, rows, self._key
        )
        return result

    def decode(self, text: str) -> str:
        """Write columns, read rows."""
        require_non_empty(text, InvalidTextError)
        if len(text) % self._key != 0:
            raise InvalidTextError(
                f"Ciphertext length {len(text)} is not a multiple of the key {self._key}",
                {"length": len(text), "key": self._key},
            )

        rows = self.rows_for(len(text))
        grid = self._fill_columns(text, rows)
        result = self._read_rows(grid)

        logger.debug(
            "route decode: %d chars, key=%d, grid %dx%d", len(text), self._key, rows, self._key
        )
        return result

    def encrypt(self, plaintext: str) -> str:
        return self.encode(plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return self.decode(ciphertext)

    @classmethod
    def parse_key(cls, raw: Any) -> int:
        """Accept an int or a string holding one, e.g. from a prompt."""
        if isinstance(raw, bool):
            raise InvalidKeyError("Key must be an integer", {"key": repr(raw)})
        if isinstance(raw, int):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip())
            except ValueError:
                pass
        raise InvalidKeyError(f"Key must be an integer, got {raw!r}", {"key": repr(raw)})

    @classmethod
    def generate_random_key(cls) -> int:
        """Generate a random column count (2-10)."""
        return random.randint(2, 10)

    def check_limits(self, max_length: int) -> None:
        """A key wider than ``max_length`` would pad a single row past the limit."""
        if self._key > max_length:
            raise InvalidKeyError(
                f"Key {self._key} exceeds the maximum of {max_length} columns",
                {"key": self._key, "max_key": max_length},
            )

    def explain(self, source: str, result: str, decrypting: bool = False) -> str:
        """Generate human-readable explanation."""
        rows = self.rows_for(len(source)) if source else 0

        if decrypting:
            return (
                f"Route transposition with {self._key} columns. "
                f"The {len(source)}-character ciphertext fills a {rows}x{self._key} table "
                f"column by column, top to bottom, and the table is read row by row, "
                f"giving {len(result)} characters. Padding spaces added during "
                f"encryption stay at the end."
            )

        padding = rows * self._key - len(source)

        return (
            f"Route transposition with {self._key} columns. "
            f"The {len(source)}-character text fills a {rows}x{self._key} table "
            f"row by row ({padding} padding space{'s' if padding != 1 else ''}), "
            f"and the table is read column by column, top to bottom, "
            f"giving {len(result)} characters."
        )

    def _fill_rows(self, text: str, rows: int) -> list[list[str]]:
        """Row-major grid, right-padded with spaces."""
        padded = text.ljust(rows * self._key, self.PAD)
        return [
            list(padded[i * self._key:(i + 1) * self._key])
            for i in range(rows)
        ]

    def _fill_columns(self, text: str, rows: int) -> list[list[str]]:
        """Column-major fill of a rows x key grid."""
        grid = [[self.PAD] * self._key for _ in range(rows)]
        idx = 0
        for col in range(self._key):
            for row in range(rows):
                grid[row][col] = text[idx]
                idx += 1
        return grid

    def _read_columns(self, grid: list[list[str]], rows: int) -> str:
        result = []
        for col in range(self._key):
            for row in range(rows):
                result.append(grid[row][col])
        return "".join(result)

    def _read_rows(self, grid: list[list[str]]) -> str:
        return "".join("".join(row) for row in grid)

    def _warn_if_wider(self, text: str) -> None:
        if self._key > len(text):
            logger.warning(
                "route key %d is wider than the %d-character text; output is a single padded row",
                self._key,
                len(text),
            )
