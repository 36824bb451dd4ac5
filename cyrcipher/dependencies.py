from typing import Annotated

from fastapi import Depends

from cyrcipher.core.config import Settings, get_settings
from cyrcipher.services.engines.registry import EngineRegistry
from cyrcipher.services.preprocessing.normalizer import TextNormalizer


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_registry() -> EngineRegistry:
    """Get engine registry."""
    return EngineRegistry()


def get_normalizer() -> TextNormalizer:
    """Get text normalizer."""
    return TextNormalizer()


RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]
NormalizerDep = Annotated[TextNormalizer, Depends(get_normalizer)]
