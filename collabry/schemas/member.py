
from datetime import datetime

from pydantic import BaseModel, EmailStr

from database.enums import MemberRole
from database.models import ProjectMember

from .user import UserSchema


class MemberSchema(BaseModel):
    user: UserSchema
    role: MemberRole
    created_date: datetime

    @classmethod
    def from_db(cls, member: ProjectMember) -> "MemberSchema":
        return cls(user=UserSchema.from_db(member.user),
                   role=member.role,
                   created_date=member.created_date)


class AddMemberSchema(BaseModel):
    email: EmailStr
