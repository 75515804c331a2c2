"""
API key check for the /api routes.
"""
import os
import secrets

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

# Set DODOCOIN_API_KEY in production; the default only suits local use
API_KEY = os.getenv("DODOCOIN_API_KEY", "dodocoin-dev-key")

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: str = Security(api_key_header)) -> str:
    """Reject requests without the ledger's API key"""
    if not api_key or not secrets.compare_digest(api_key, API_KEY):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid X-API-Key for the coin ledger"
        )
    return api_key
