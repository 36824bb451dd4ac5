import logging

from fastapi import APIRouter, HTTPException, status

from cyrcipher.core.exceptions import CipherLabError, TextTooLongError
from cyrcipher.dependencies import NormalizerDep, RegistryDep, SettingsDep
from cyrcipher.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the route or polyalphabetic cipher. A random key is generated when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
    normalizer: NormalizerDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Key and text errors are raised as CipherLabError subclasses and
    rendered by the application's exception handlers.
    """
    if len(request.plaintext) > settings.max_text_length:
        raise TextTooLongError(len(request.plaintext), settings.max_text_length)

    engine_class = registry.get_engine_class(request.cipher_type)

    try:
        key = request.key
        if key is None:
            key = engine_class.generate_random_key()

        engine = engine_class.from_raw_key(key)
        engine.check_limits(settings.max_text_length)
        plaintext = normalizer.normalize(request.plaintext, compose=engine.composes_input)
        ciphertext = engine.encrypt(plaintext)

        return EncryptResponse(
            ciphertext=ciphertext,
            cipher_type=request.cipher_type,
            key_used=engine.key,
            explanation=engine.explain(plaintext, ciphertext),
        )

    except CipherLabError:
        raise
    except Exception as e:
        logger.exception("encryption failed for %s", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )
