
from uuid import UUID

from pydantic import AnyHttpUrl, BaseModel, EmailStr, Field

from database.models import User


class UserSchema(BaseModel):
    id: UUID
    name: str
    email: str

    @classmethod
    def from_db(cls, user: User) -> "UserSchema":
        return cls(**user.__dict__)


class CredsSchema(BaseModel):
    email: EmailStr
    password: str


class RegisterSchema(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str
    password_repeat: str


class PasswordUpdateSchema(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str
    new_password_repeat: str


class ProfileUpdateSchema(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    image: AnyHttpUrl | None = None
    email: EmailStr | None = None

