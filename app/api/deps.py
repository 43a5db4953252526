from typing import Optional

from fastapi import Header, HTTPException


async def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Acting user, as forwarded by the authentication layer in front of the API."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="X-User-Id header is required")
    return x_user_id
