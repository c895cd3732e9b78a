from datetime import UTC, datetime

from fastapi import Cookie, Depends
from redis.asyncio import Redis

from collabry.exceptions import *
from collabry.schemas import UserSchema
from collabry.token import AccessToken
from database.models import User
from database.redis import RedisType, get_redis_client
from database.repositories import UserRepository

from .database import get_user_repo


async def get_user(access_token: str = Cookie(default=None),
                   redis: Redis = Depends(get_redis_client)
                   ) -> UserSchema:
    if access_token is None:
        raise AccessTokenDoesNotExistException()
    access = AccessToken.from_token(access_token)
    current_time = datetime.now(UTC).replace(tzinfo=None)
    if access.created_date > current_time or access.created_date + access.lifetime < current_time:
        raise AccessTokenExpiredException()
    if access.user is None:
        raise AccessTokenDamagedException()
    invalidated_at = await redis.get(f"{RedisType.invalidated_access_token}:{access.user.id}")
    if invalidated_at is not None and access.created_date < datetime.fromisoformat(invalidated_at):
        raise AccessTokenInvalidatedException()
    return access.user


async def get_user_db(user: UserSchema = Depends(get_user),
                      ur: UserRepository = Depends(get_user_repo)
                      ) -> User:
    user_db = await ur.get_by_id(user.id)
    if user_db is None:
        raise UnauthorizedException()
    return user_db
