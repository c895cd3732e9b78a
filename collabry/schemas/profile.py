
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from .project import MembershipSchema, ProjectBriefSchema
from .task import TaskBriefSchema


class ProfileSchema(BaseModel):
    id: UUID
    name: str
    email: str
    bio: str | None = None
    image: str | None = None
    created_date: datetime
    last_modified_date: datetime
    created_tasks: list[TaskBriefSchema] = []
    assigned_tasks: list[TaskBriefSchema] = []
    projects: list[MembershipSchema] = []
    created_projects: list[ProjectBriefSchema] = []
