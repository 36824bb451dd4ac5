import unicodedata
from dataclasses import dataclass
from enum import Enum


class NormalizationMode(str, Enum):
    """Text normalization modes."""

    RAW = "raw"  # No changes beyond composition
    LINE = "line"  # Trailing line breaks removed


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    mode: NormalizationMode
    changed: bool


class TextNormalizer:
    """
    Prepares decoded input for the ciphers.

    Handles:
    - Unicode normalization (NFC), so a decomposed "Ё" (Е + U+0308)
      becomes the single alphabet letter
    - Trailing line breaks left by console input
    - Removal of the route cipher's padding, on request

    Case is left alone; the ciphers fold it themselves.
    """

    def normalize(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.RAW,
        compose: bool = True,
    ) -> str:
        """
        Normalize text before it reaches a cipher.

        Args:
            text: Input text to normalize
            mode: Normalization mode
            compose: Apply NFC composition; pass False for text whose
                characters must keep their exact order and count

        Returns:
            Normalized text string
        """
        return self.normalize_full(text, mode, compose).text

    def normalize_full(
        self,
        text: str,
        mode: NormalizationMode = NormalizationMode.RAW,
        compose: bool = True,
    ) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Input text to normalize
            mode: Normalization mode
            compose: Apply NFC composition

        Returns:
            NormalizedText with details about the normalization
        """
        normalized = unicodedata.normalize("NFC", text) if compose else text

        if mode == NormalizationMode.LINE:
            normalized = normalized.rstrip("\r\n")

        return NormalizedText(
            text=normalized,
            original=text,
            mode=mode,
            changed=normalized != text,
        )

    def strip_padding(self, text: str, pad: str = " ") -> str:
        """Remove trailing pad characters added by a grid cipher."""
        return text.rstrip(pad)
