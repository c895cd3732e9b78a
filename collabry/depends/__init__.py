

from .database import (get_member_repo, get_project_repo, get_task_repo,
                       get_user_repo)
from .get_member import get_new_member, get_removable_member
from .get_project import get_project, get_project_editor, get_project_viewer
from .get_task import get_task, get_task_creator, get_task_editor, get_task_viewer
from .get_user import get_user, get_user_db
