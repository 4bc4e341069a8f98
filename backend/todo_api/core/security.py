from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

# Use Argon2 instead of bcrypt (more reliable on Python 3.13)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        # unidentifiable hash
        return False


class TokenService:
    """Stateless signed session tokens carrying a subject and an expiry."""

    def __init__(self, secret: str, expire_minutes: int = 60):
        if not secret:
            raise ValueError("JWT secret is required")
        self._secret = secret
        self.lifetime = timedelta(minutes=expire_minutes)

    @property
    def max_age(self) -> int:
        return int(self.lifetime.total_seconds())

    def issue(self, subject: str, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(subject),
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[str]:
        """Return the token's subject, or None if it is tampered, malformed or expired."""
        if not token or not isinstance(token, str):
            return None
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[ALGORITHM], options={"require_exp": True}
            )
        except JWTError:
            return None

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        return subject
