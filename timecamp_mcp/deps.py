"""Per-request dependencies for the tool endpoints."""
from fastapi import Header, HTTPException

from . import config


def resolve_token(authorization: str | None, default: str | None = None) -> str:
    """Pick the bearer token for one call: header first, configured default second."""
    if authorization:
        return authorization[len("Bearer "):] if authorization.startswith("Bearer ") else authorization
    return default or ""


async def get_bearer_token(authorization: str | None = Header(None)) -> str:
    token = resolve_token(authorization, config.TOKEN)
    if not token:
        raise HTTPException(401, "Unauthorized: No bearer token provided")
    return token


async def get_transport():
    """HTTP transport handed to the TimeCamp client; ``None`` means the real network."""
    return None
