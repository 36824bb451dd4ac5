from collections.abc import Iterable, Mapping
from types import MappingProxyType

from cyrcipher.core.exceptions import CipherError


class Alphabet:
    """
    Ordered, immutable set of letters with a two-way position index.

    Positions are zero-based: the first letter is 0, the last is
    ``len(alphabet) - 1``.
    """

    def __init__(self, letters: str):
        if not letters:
            raise ValueError("Alphabet must not be empty")
        if len(set(letters)) != len(letters):
            raise ValueError("Alphabet letters must be distinct")

        self._letters = letters
        self._positions: Mapping[str, int] = MappingProxyType(
            {letter: idx for idx, letter in enumerate(letters)}
        )

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def positions(self) -> Mapping[str, int]:
        """Read-only letter -> position mapping."""
        return self._positions

    @property
    def size(self) -> int:
        return len(self._letters)

    def __len__(self) -> int:
        return len(self._letters)

    def __contains__(self, char: object) -> bool:
        return char in self._positions

    def __iter__(self):
        return iter(self._letters)

    def __repr__(self) -> str:
        return f"Alphabet({self._letters!r})"

    def position(self, letter: str) -> int:
        """Position of a letter; raises KeyError for foreign characters."""
        return self._positions[letter]

    def letter(self, position: int) -> str:
        """Letter at a position, taken modulo the alphabet size."""
        return self._letters[position % len(self._letters)]

    def to_positions(self, text: str) -> list[int]:
        return [self._positions[c] for c in text]

    def to_text(self, positions: Iterable[int]) -> str:
        return "".join(self.letter(p) for p in positions)

    def foreign_chars(self, text: str) -> list[str]:
        """Distinct characters of ``text`` missing from the alphabet, in order of appearance."""
        seen: list[str] = []
        for char in text:
            if char not in self._positions and char not in seen:
                seen.append(char)
        return seen


RUSSIAN_ALPHABET = Alphabet("АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ")


def require_non_empty(text: str, error: type[CipherError], what: str = "Text") -> str:
    """Reject anything that is not a non-empty string."""
    if not isinstance(text, str):
        raise error(f"{what} must be a string", {"type": type(text).__name__})
    if len(text) == 0:
        raise error(f"{what} is empty")
    return text


def require_alphabet_text(
    text: str,
    error: type[CipherError],
    alphabet: Alphabet = RUSSIAN_ALPHABET,
    what: str = "Text",
) -> str:
    """
    Upper-fold ``text`` and check every character belongs to ``alphabet``.

    Args:
        text: Raw text or keyword
        error: Exception class raised on failure
        alphabet: Alphabet to validate against
        what: Label used in the error message

    Returns:
        The upper-folded text
    """
    folded = require_non_empty(text, error, what).upper()

    foreign = alphabet.foreign_chars(folded)
    if foreign:
        raise error(
            f"{what} contains characters outside the alphabet: {''.join(foreign)!r}",
            {"invalid_chars": foreign},
        )

    return folded
