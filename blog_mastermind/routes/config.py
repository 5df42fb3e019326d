import logging
from typing import Callable

from fastapi import APIRouter, Depends

from blog_mastermind.core.api_key_store import ApiKeyStore
from blog_mastermind.schemas.analysis import ApiKeyRequest, ApiKeyStatus
from blog_mastermind.services.openai_service import check_api_key
from blog_mastermind.utils.deps import (
    get_api_key_store,
    get_llm_client_factory,
    require_valid_api_key,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/config", tags=["config"])


# ----------------------------------------
# SAVE / READ / REMOVE THE USER KEY
# ----------------------------------------
@router.post("/api-key")
def save_api_key(body: ApiKeyRequest, store: ApiKeyStore = Depends(get_api_key_store)):
    api_key = require_valid_api_key(body.apiKey)
    store.set(api_key)
    logger.info("OpenRouter API key saved")

    return {
        "success": True,
        "message": "API key saved successfully",
        "hasKey": True,
    }


@router.get("/api-key", response_model=ApiKeyStatus)
def get_api_key_status(store: ApiKeyStore = Depends(get_api_key_store)):
    # Only the masked preview ever leaves the server
    return ApiKeyStatus(hasKey=store.has_key(), keyPreview=store.preview())


@router.delete("/api-key")
def remove_api_key(store: ApiKeyStore = Depends(get_api_key_store)):
    store.clear()
    logger.info("OpenRouter API key removed")

    return {
        "success": True,
        "message": "API key removed successfully",
        "hasKey": False,
    }


# ----------------------------------------
# VALIDATE A KEY WITHOUT STORING IT
# ----------------------------------------
@router.post("/validate-api-key")
def validate_api_key(
    body: ApiKeyRequest,
    llm_client_factory: Callable = Depends(get_llm_client_factory),
):
    """
    Format-check the key, then try a trivial completion with it.
    If the live call fails the format check alone decides.
    """
    api_key = require_valid_api_key(body.apiKey)

    try:
        check_api_key(llm_client_factory(api_key))
    except Exception as e:
        logger.error(f"API validation error: {e}", exc_info=True)
        return {
            "success": True,
            "message": "API key format is valid (format validation only)",
            "valid": True,
            "note": "SDK validation failed, but format is correct",
        }

    return {
        "success": True,
        "message": "API key is valid and working",
        "valid": True,
    }
