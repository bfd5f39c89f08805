from __future__ import annotations
from datetime import datetime, timedelta, timezone
from flask import current_app
from jose import JWTError, jwt

ALGORITHM = "HS256"

def issue_token(user) -> str:
    """Token Bearer com o id do usuário em ``sub`` e a role no payload."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user.id),
        "role": user.role,
        "iat": now,
        "exp": now + timedelta(days=current_app.config["JWT_EXPIRES_DAYS"]),
    }
    return jwt.encode(claims, current_app.config["JWT_SECRET"], algorithm=ALGORITHM)

def decode_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, current_app.config["JWT_SECRET"], algorithms=[ALGORITHM])
    except JWTError:
        return None

def bearer_token(authorization: str | None) -> str | None:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
