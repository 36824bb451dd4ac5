import logging

from fastapi import APIRouter, HTTPException, status

from cyrcipher.core.exceptions import CipherLabError, TextTooLongError
from cyrcipher.dependencies import NormalizerDep, RegistryDep, SettingsDep
from cyrcipher.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with the route or polyalphabetic cipher and a known key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
    normalizer: NormalizerDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    Route cipher output keeps its padding spaces unless
    ``strip_padding`` is set.
    """
    if len(request.ciphertext) > settings.max_text_length:
        raise TextTooLongError(len(request.ciphertext), settings.max_text_length)

    engine = registry.create(request.cipher_type, request.key)
    engine.check_limits(settings.max_text_length)

    try:
        ciphertext = normalizer.normalize(request.ciphertext, compose=engine.composes_input)
        plaintext = engine.decrypt(ciphertext)
        explanation = engine.explain(ciphertext, plaintext, decrypting=True)

        if request.strip_padding:
            plaintext = normalizer.strip_padding(plaintext)

        return DecryptResponse(
            plaintext=plaintext,
            cipher_type=request.cipher_type,
            key_used=engine.key,
            explanation=explanation,
        )

    except CipherLabError:
        raise
    except Exception as e:
        logger.exception("decryption failed for %s", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
