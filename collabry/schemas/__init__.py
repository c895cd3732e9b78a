
from .member import AddMemberSchema, MemberSchema
from .profile import ProfileSchema
from .project import (CreateProjectSchema, EditProjectSchema,
                      MembershipSchema, ProjectBriefSchema, ProjectSchema)
from .task import (TaskBriefSchema, TaskCreateSchema, TaskSchema,
                   TaskStatusUpdateSchema, TaskUpdateSchema)
from .user import (CredsSchema, PasswordUpdateSchema, ProfileUpdateSchema,
                   RegisterSchema, UserSchema)
from .websocket import WebsocketMessage
