
import hashlib
import hmac
import os
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User
from database.models.base import utc_now

PBKDF2_ITERATIONS = 310_000


def hash_password(password: str, salt: bytes | None = None) -> str:
    salt = salt or os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        salt_hex, digest_hex = password_hash.split("$", 1)
    except ValueError:
        return False
    expected = hash_password(password, bytes.fromhex(salt_hex)).split("$", 1)[1]
    return hmac.compare_digest(expected, digest_hex)


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email.strip().lower())
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_by_auth(self, email: str, password: str) -> User | None:
        user = await self.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user

    async def create(self, name: str, email: str, password: str) -> User | None:
        user = User(name=name,
                    email=email.strip().lower(),
                    password_hash=hash_password(password))
        self.session.add(user)
        await self.session.commit()
        return await self.get_by_id(user.id)

    async def update_secret(self, user: User) -> None:
        user.secret = uuid4()
        user.last_modified_date = utc_now()
        await self.session.commit()

    async def update_password(self, user: User, new_password: str) -> None:
        user.password_hash = hash_password(new_password)
        user.secret = uuid4()
        user.last_modified_date = utc_now()
        await self.session.commit()

    async def update_profile(self,
                             user: User,
                             name: str | None = None,
                             bio: str | None = None,
                             image: str | None = None,
                             email: str | None = None
                             ) -> None:
        if name is not None:
            user.name = name
        if bio is not None:
            user.bio = bio
        if image is not None:
            user.image = image
        if email is not None:
            user.email = email.strip().lower()
        user.last_modified_date = utc_now()
        await self.session.commit()
