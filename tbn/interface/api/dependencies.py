"""Shared FastAPI dependencies."""

from fastapi import Header, HTTPException, status


def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    """Extract Bearer token from Authorization header.

    Args:
        authorization: Raw Authorization header

    Returns:
        The extracted token

    Raises:
        HTTPException: If Authorization header is missing or invalid
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header missing",
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format. Expected 'Bearer <token>'",
        )

    return token.strip()
