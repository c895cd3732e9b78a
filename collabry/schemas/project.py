
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from database.enums import MemberRole
from database.models import Project, ProjectMember

from .member import MemberSchema
from .task import TaskSchema


class CreateProjectSchema(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=200)
    color: str | None = Field(default=None, min_length=1, max_length=32)


class EditProjectSchema(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = Field(default=None, max_length=200)
    color: str | None = Field(default=None, min_length=1, max_length=32)


class ProjectBriefSchema(BaseModel):
    id: UUID
    name: str
    description: str
    created_date: datetime

    @classmethod
    def from_db(cls, project: Project) -> "ProjectBriefSchema":
        return cls(**project.__dict__)


class MembershipSchema(BaseModel):
    project: ProjectBriefSchema
    role: MemberRole

    @classmethod
    def from_db(cls, member: ProjectMember, project: Project) -> "MembershipSchema":
        return cls(project=ProjectBriefSchema.from_db(project), role=member.role)


class ProjectSchema(BaseModel):
    id: UUID
    name: str
    description: str
    color: str | None = None
    creator_id: UUID
    created_date: datetime
    last_modified_date: datetime
    is_creator: bool = False
    members: list[MemberSchema] = []
    tasks: list[TaskSchema] = []

    @classmethod
    def from_db(cls,
                project: Project,
                viewer_id: UUID | None = None,
                with_tasks: bool = False
                ) -> "ProjectSchema":
        return cls(id=project.id,
                   name=project.name,
                   description=project.description,
                   color=project.color,
                   creator_id=project.creator_id,
                   created_date=project.created_date,
                   last_modified_date=project.last_modified_date,
                   is_creator=viewer_id is not None and viewer_id == project.creator_id,
                   members=[MemberSchema.from_db(m) for m in project.members],
                   tasks=[TaskSchema.from_db(t) for t in project.tasks] if with_tasks else [])
