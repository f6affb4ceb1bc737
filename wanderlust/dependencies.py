import hmac
from typing import Optional

from fastapi import Header, HTTPException

from wanderlust.config import settings


async def verify_api_key(x_api_key: Optional[str] = Header(None)) -> str:
    """Reject admin calls without the configured X-API-Key.

    A missing header is treated like a wrong one so callers always get 401.
    """
    if x_api_key is None or not hmac.compare_digest(x_api_key, settings.API_KEY):
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return x_api_key
