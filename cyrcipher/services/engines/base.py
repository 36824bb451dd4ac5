from abc import ABC, abstractmethod
from typing import Any

from cyrcipher.core.exceptions import InvalidKeyError
from cyrcipher.models.schemas import CipherFamily, CipherType


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine is bound to one validated key at construction and is
    immutable afterwards. Each implementation must provide:
    - encrypt(): Transform plaintext into ciphertext
    - decrypt(): Reverse the transform
    - explain(): Generate human-readable explanation
    - parse_key(): Turn a raw key (e.g. from a form or a prompt) into the engine's key type
    - generate_random_key(): Produce a valid key
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    # Whether input may be composed to NFC before it reaches the engine.
    # Must stay False for engines that move characters around, since
    # composition can merge a moved combining mark into its new neighbour.
    composes_input: bool = False

    @property
    @abstractmethod
    def key(self) -> Any:
        """The key this engine was constructed with, in display form."""
        pass

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext with the bound key.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            Ciphertext

        Raises:
            InvalidTextError: If the plaintext is unusable
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext with the bound key.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Plaintext

        Raises:
            InvalidTextError: If the ciphertext is unusable
        """
        pass

    @abstractmethod
    def explain(self, source: str, result: str, decrypting: bool = False) -> str:
        """
        Generate human-readable explanation of a transform.

        Args:
            source: The text that went in
            result: The text that came out
            decrypting: Whether the transform was a decryption

        Returns:
            Explanation string
        """
        pass

    def check_limits(self, max_length: int) -> None:
        """
        Reject keys that would make the output larger than ``max_length`` allows.

        Engines whose output length equals their input length have nothing to check.

        Raises:
            InvalidKeyError: If the bound key is too large for the limit
        """
        pass

    @classmethod
    @abstractmethod
    def parse_key(cls, raw: Any) -> Any:
        """
        Convert a raw key into the form the constructor accepts.

        Raises:
            InvalidKeyError: If the raw value cannot be a key
        """
        pass

    @classmethod
    @abstractmethod
    def generate_random_key(cls) -> Any:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @classmethod
    def from_raw_key(cls, raw: Any) -> "CipherEngine":
        """Build an engine from an unparsed key."""
        return cls(cls.parse_key(raw))

    @classmethod
    def validate_key(cls, raw: Any) -> bool:
        """Check whether a raw key would be accepted."""
        try:
            cls.from_raw_key(raw)
        except InvalidKeyError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
