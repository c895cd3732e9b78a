

from fastapi import APIRouter

from .auth import router as auth_router
from .profile import router as profile_router
from .project import router as project_router
from .task import router as task_router

router = APIRouter(prefix="/api")
router.include_router(auth_router)
router.include_router(profile_router)
router.include_router(project_router)
router.include_router(task_router)
