"""Issuing and verifying signed access tokens."""

import logging
import re
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from pydantic import ValidationError

from src.config import Settings
from src.errors import AppError, ErrorKind
from src.schemas.auth import AuthenticatedIdentity

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN_SECONDS = 604800  # 7 days

_DURATION_PATTERN = re.compile(r"^(\d+)([smhdw])$")
_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
    "w": 604800,
}


def parse_expires_in(value: str | None) -> int:
    """Convert a duration such as ``30m`` or ``7d`` to seconds.

    Anything that does not match ``<integer><unit>`` falls back to 7 days.
    """
    match = _DURATION_PATTERN.match(value or "")
    if not match:
        return DEFAULT_EXPIRES_IN_SECONDS
    amount, unit = match.groups()
    return int(amount) * _UNIT_SECONDS[unit]


class TokenService:
    """Signs and verifies HS256 bearer tokens with a server-held secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: str | None = None):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in_seconds = parse_expires_in(expires_in)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(settings.jwt_secret, settings.jwt_algorithm, settings.jwt_expires_in)

    def issue(self, identity: AuthenticatedIdentity) -> str:
        """Create a signed token for the identity."""
        expire = datetime.now(UTC) + timedelta(seconds=self.expires_in_seconds)
        to_encode = {
            "id": identity.id,
            "email": identity.email,
            "name": identity.name,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> AuthenticatedIdentity:
        """Decode a token, checking signature, expiry and claims."""
        try:
            payload = jwt.decode(
                token, self.secret, algorithms=[self.algorithm], options={"require_exp": True}
            )
            return AuthenticatedIdentity.model_validate(payload)
        except (JWTError, ValidationError) as e:
            logger.debug(f"Token rejected: {e}")
            raise AppError(ErrorKind.INVALID_OR_EXPIRED_TOKEN) from e
