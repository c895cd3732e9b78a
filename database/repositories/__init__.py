
from .project_member_repository import ProjectMemberRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository
