
import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Cookie, Depends, Request, Response
from redis.asyncio import Redis

from collabry.config import Config
from collabry.depends import get_user, get_user_db, get_user_repo
from collabry.exceptions import *
from collabry.schemas import (CredsSchema, PasswordUpdateSchema,
                              RegisterSchema, UserSchema)
from collabry.token import AccessToken, RefreshToken
from database.models import User
from database.redis import RedisType, get_redis_client
from database.repositories import UserRepository
from database.repositories.user_repository import verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def set_auth_cookies(response: Response, user: User) -> None:
    refresh = RefreshToken(user_id=user.id, secret=user.secret)
    access = AccessToken(UserSchema.from_db(user))
    response.set_cookie(key="refresh_token", value=refresh.to_token(),
                        max_age=Config.refresh_token_lifetime, httponly=True)
    response.set_cookie(key="access_token", value=access.to_token(),
                        max_age=Config.access_token_lifetime, httponly=True)


async def check_ip_counter(redis: Redis, ip: str) -> int:
    ip_counter = await redis.get(f"{RedisType.incorrect_credentials_ip}:{ip}")
    if ip_counter is None:
        return 0
    if int(ip_counter) >= Config.ip_buffer:
        raise TooManyIncorrectCredentialsException(ip)
    return int(ip_counter)


async def invalidate_access_tokens(redis: Redis, user: User) -> None:
    await redis.set(f"{RedisType.invalidated_access_token}:{user.id}",
                    datetime.now(UTC).replace(tzinfo=None).isoformat(),
                    ex=Config.access_token_lifetime)


def check_new_password(password: str, password_repeat: str) -> None:
    if password != password_repeat:
        raise PasswordsDoNotMatchException()
    if len(password) < Config.min_password_length:
        raise PasswordTooShortException(Config.min_password_length)


@router.post("/refresh")
async def refresh(response: Response,
                  refresh_token: str = Cookie(None),
                  ur: UserRepository = Depends(get_user_repo)
                  ):
    if refresh_token is None:
        raise RefreshTokenDoesNotExistException()
    refresh = RefreshToken.from_token(refresh_token)
    current_time = datetime.now(UTC).replace(tzinfo=None)
    if refresh.created_date > current_time or refresh.created_date + refresh.lifetime < current_time:
        raise RefreshTokenExpiredException()
    user = await ur.get_by_id(refresh.user_id)
    if user is None or user.secret != refresh.secret:
        raise InvalidRefreshTokenException()
    access = AccessToken(UserSchema.from_db(user), current_time)
    response.set_cookie(key="access_token", value=access.to_token(),
                        max_age=Config.access_token_lifetime, httponly=True)
    return {"message": "OK"}


@router.post("/register")
async def register(request: Request,
                   response: Response,
                   register_data: RegisterSchema,
                   redis: Redis = Depends(get_redis_client),
                   ur: UserRepository = Depends(get_user_repo)
                   ) -> UserSchema:
    await check_ip_counter(redis, request.client.host)  # type: ignore
    check_new_password(register_data.password, register_data.password_repeat)
    if await ur.get_by_email(register_data.email) is not None:
        raise UserAlreadyExistsException()
    user = await ur.create(register_data.name, register_data.email, register_data.password)
    if user is None:
        raise SendFeedbackToAdminException()
    logger.info("registered user %s", user.id)
    set_auth_cookies(response, user)
    return UserSchema.from_db(user)


@router.post("/login")
async def login(request: Request,
                response: Response,
                credentials: CredsSchema,
                redis: Redis = Depends(get_redis_client),
                ur: UserRepository = Depends(get_user_repo)
                ):
    ip = request.client.host  # type: ignore
    ip_counter = await check_ip_counter(redis, ip)
    user = await ur.get_by_auth(credentials.email, credentials.password)
    if user is None:
        await redis.set(f"{RedisType.incorrect_credentials_ip}:{ip}", ip_counter + 1,
                        ex=Config.ip_buffer_lifetime)
        logger.warning("failed login from %s", ip)
        raise InvalidCredentialsException()
    set_auth_cookies(response, user)
    return {"message": "OK"}


@router.post("/logout")
async def logout(response: Response,
                 refresh_token: str = Cookie(None)
                 ):
    if refresh_token is None:
        raise UnauthorizedException()
    response.delete_cookie(key="refresh_token")
    response.delete_cookie(key="access_token")
    return {"message": "OK"}


@router.post("/logout_all")
async def logout_all(response: Response,
                     user: User = Depends(get_user_db),
                     redis: Redis = Depends(get_redis_client),
                     ur: UserRepository = Depends(get_user_repo)
                     ):
    await ur.update_secret(user)
    await invalidate_access_tokens(redis, user)
    response.delete_cookie(key="refresh_token")
    response.delete_cookie(key="access_token")
    return {"message": "OK"}


@router.patch("/update_credentials")
async def update_credentials(response: Response,
                             password_data: PasswordUpdateSchema,
                             user: User = Depends(get_user_db),
                             redis: Redis = Depends(get_redis_client),
                             ur: UserRepository = Depends(get_user_repo)
                             ):
    if not verify_password(password_data.current_password, user.password_hash):
        raise CurrentPasswordIncorrectException()
    check_new_password(password_data.new_password, password_data.new_password_repeat)
    if password_data.new_password == password_data.current_password:
        raise SamePasswordException()
    await ur.update_password(user, password_data.new_password)
    await invalidate_access_tokens(redis, user)
    set_auth_cookies(response, user)
    return {"message": "OK"}


@router.get("/user_info")
async def user_info(user: UserSchema = Depends(get_user)) -> UserSchema:
    return user
