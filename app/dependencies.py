from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.models.user import User
from app.utils.exceptions import UnauthorizedException


async def verify_api_key(x_api_key: str = Header(default="")) -> None:
    if not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=403, detail="Invalid or missing API key")


async def get_current_user(
    x_user_id: str = Header(default=""),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the caller forwarded by the upstream identity provider."""
    if not x_user_id:
        raise UnauthorizedException()
    user = await db.get(User, x_user_id)
    if user is None:
        raise UnauthorizedException()
    return user
