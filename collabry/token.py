
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from collabry.config import SECRET, Config
from collabry.exceptions import (AccessTokenDamagedException,
                                 InvalidRefreshTokenException)
from collabry.schemas.user import UserSchema


def _now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class AccessToken:
    lifetime = timedelta(seconds=Config.access_token_lifetime)

    def __init__(self, user: UserSchema, created_date: datetime | None = None):
        self.user = user
        self.created_date = created_date or _now()

    def to_token(self) -> str:
        return jwt.encode({"user": self.user.model_dump(mode="json"),
                           "created_date": self.created_date.isoformat()},
                          SECRET, algorithm=Config.algorithm)

    @classmethod
    def from_token(cls, token: str) -> "AccessToken":
        try:
            payload = jwt.decode(token, SECRET, algorithms=[Config.algorithm])
            return cls(UserSchema(**payload["user"]),
                       datetime.fromisoformat(payload["created_date"]))
        except (jwt.PyJWTError, KeyError, ValueError, TypeError):
            raise AccessTokenDamagedException()


class RefreshToken:
    lifetime = timedelta(seconds=Config.refresh_token_lifetime)

    def __init__(self, user_id: UUID, secret: UUID, created_date: datetime | None = None):
        self.user_id = user_id
        self.secret = secret
        self.created_date = created_date or _now()

    def to_token(self) -> str:
        return jwt.encode({"user_id": str(self.user_id),
                           "secret": str(self.secret),
                           "created_date": self.created_date.isoformat()},
                          SECRET, algorithm=Config.algorithm)

    @classmethod
    def from_token(cls, token: str) -> "RefreshToken":
        try:
            payload = jwt.decode(token, SECRET, algorithms=[Config.algorithm])
            return cls(UUID(payload["user_id"]),
                       UUID(payload["secret"]),
                       datetime.fromisoformat(payload["created_date"]))
        except (jwt.PyJWTError, KeyError, ValueError, TypeError):
            raise InvalidRefreshTokenException()
