

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from redis.asyncio import Redis

from collabry.depends import (get_project, get_project_editor,
                              get_project_repo, get_project_viewer,
                              get_user_db)
from collabry.exceptions import *
from collabry.schemas import (CreateProjectSchema, EditProjectSchema,
                              ProjectSchema)
from collabry.websocket.publish import mark_project_update
from collabry.websocket.start_polling import start_polling
from database.models import Project, User
from database.redis import get_redis_client
from database.repositories import ProjectRepository

from .member import router as member_router

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/project", tags=["project"])

router.include_router(member_router)


@router.post("")
async def create(create_data: CreateProjectSchema,
                 user: User = Depends(get_user_db),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ) -> ProjectSchema:
    project = await pr.get_by_user_and_name(user, create_data.name)
    if project is not None:
        raise ProjectAlreadyExistsException()
    project = await pr.create(creator=user,
                              name=create_data.name,
                              description=create_data.description,
                              color=create_data.color)
    if project is None:
        raise SendFeedbackToAdminException()
    logger.info("user %s created project %s", user.id, project.id)
    return ProjectSchema.from_db(project, user.id)


@router.get("")
async def list_projects(user: User = Depends(get_user_db),
                        pr: ProjectRepository = Depends(get_project_repo)
                        ) -> list[ProjectSchema]:
    projects = await pr.get_by_user(user)
    return [ProjectSchema.from_db(p, user.id) for p in projects]


@router.get("/{project_id}")
async def get_by_id(project: Project = Depends(get_project),
                    user: User = Depends(get_project_viewer)
                    ) -> ProjectSchema:
    return ProjectSchema.from_db(project, user.id, with_tasks=True)


@router.delete("/{project_id}")
async def delete(project: Project = Depends(get_project),
                 user: User = Depends(get_project_editor),
                 redis: Redis = Depends(get_redis_client),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ):
    await pr.delete(project)
    await mark_project_update(redis, project.id, user.id)
    logger.info("user %s deleted project %s", user.id, project.id)
    return {"message": "OK"}


@router.patch("/{project_id}")
async def update(update_data: EditProjectSchema,
                 project: Project = Depends(get_project),
                 user: User = Depends(get_project_editor),
                 redis: Redis = Depends(get_redis_client),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ) -> ProjectSchema:
    if not update_data.model_dump(exclude_none=True):
        raise NoFieldsToUpdateException()
    if update_data.name is not None and update_data.name != project.name:
        if await pr.get_by_user_and_name(user, update_data.name) is not None:
            raise ProjectAlreadyExistsException()
    await pr.update(project,
                    update_data.name,
                    update_data.description,
                    update_data.color)
    await mark_project_update(redis, project.id, user.id)
    return ProjectSchema.from_db(project, user.id)


@router.websocket("/ws/{project_id}")
async def websocket(websocket: WebSocket,
                    project: Project = Depends(get_project),
                    user: User = Depends(get_project_viewer),
                    redis: Redis = Depends(get_redis_client)
                    ):
    await websocket.accept()
    try:
        await websocket.send_json({"message": "Connected"})
        async for item in start_polling(websocket, redis, project, user.id):
            await websocket.send_text(item.model_dump_json())
    except WebSocketDisconnect:
        logger.debug("websocket for project %s closed by client", project.id)
