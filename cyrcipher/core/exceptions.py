from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """The two ways a cipher can refuse its input."""

    INVALID_KEY = "invalid_key"
    INVALID_TEXT = "invalid_text"


class CipherLabError(Exception):
    """Base exception for all cyrcipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = dict(details or {})
        super().__init__(self.message)


class ValidationError(CipherLabError, ValueError):
    """Raised when input validation fails."""

    pass


class CipherError(ValidationError):
    """Raised by a cipher when its key or text is unusable."""

    kind: ErrorKind

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.details.setdefault("kind", self.kind.value)


class InvalidKeyError(CipherError):
    """Raised at construction time when the key is structurally invalid."""

    kind = ErrorKind.INVALID_KEY


class InvalidTextError(CipherError):
    """Raised when the text to transform is empty or not representable."""

    kind = ErrorKind.INVALID_TEXT


class TextTooLongError(ValidationError):
    """Raised when text exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineNotFoundError(CipherLabError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
