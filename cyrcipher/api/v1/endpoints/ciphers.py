from fastapi import APIRouter

from cyrcipher.dependencies import RegistryDep
from cyrcipher.models.schemas import CipherInfo

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the registered cipher engines and their alphabets.",
)
async def list_ciphers(registry: RegistryDep) -> list[CipherInfo]:
    items = []
    for engine_class in registry.get_all_engines():
        alphabet = getattr(engine_class, "ALPHABET", None)
        items.append(CipherInfo(
            cipher_type=engine_class.cipher_type,
            cipher_family=engine_class.cipher_family,
            name=engine_class.name,
            description=engine_class.description,
            alphabet=alphabet.letters if alphabet is not None else None,
        ))
    return items
