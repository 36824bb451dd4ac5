from typing import Any, Type

from cyrcipher.core.exceptions import EngineNotFoundError
from cyrcipher.models.schemas import CipherFamily, CipherType
from cyrcipher.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Engines are keyed, so the registry hands out classes and builds
    fresh instances on demand instead of caching them.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class RouteTranspositionCipher(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType | str) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If nothing is registered under that type
        """
        try:
            cipher_type = CipherType(cipher_type)
        except ValueError:
            raise EngineNotFoundError(str(cipher_type)) from None

        if cipher_type not in self._engines:
            raise EngineNotFoundError(cipher_type.value)

        return self._engines[cipher_type]

    def create(self, cipher_type: CipherType | str, key: Any) -> CipherEngine:
        """
        Build an engine bound to ``key``.

        Args:
            cipher_type: The type of cipher
            key: Raw key, parsed by the engine class

        Returns:
            Engine instance

        Raises:
            EngineNotFoundError: Unknown cipher type
            InvalidKeyError: The key is rejected by the engine
        """
        return self.get_engine_class(cipher_type).from_raw_key(key)

    def get_engines_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """
        Get all engine classes belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of engine classes
        """
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    def get_all_engines(self) -> list[Type[CipherEngine]]:
        return list(self._engines.values())

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cyrcipher.services.engines.polyalphabetic import vigenere  # noqa: F401
    from cyrcipher.services.engines.transposition import route  # noqa: F401


# Load engines when module is imported
_load_engines()
