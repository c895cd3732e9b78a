
from .member_role import MemberRole
from .priority import Priority
from .task_status import TaskStatus
