from fastapi import Header, Request

from app.services.security import decode_access_token
from app.utils.exceptions import UnauthorizedError


async def get_current_user(request: Request, authorization: str = Header(default="")) -> dict:
    """Require ``Authorization: Bearer <token>`` and return the token payload."""
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthorizedError("Missing bearer token")

    payload = decode_access_token(token)
    request.state.user = payload
    return payload
