

import json
from typing import Any, AsyncGenerator
from uuid import UUID

from fastapi import WebSocket, WebSocketDisconnect
from redis.asyncio import Redis

from collabry.schemas import ProjectSchema, TaskSchema, WebsocketMessage
from collabry.schemas.websocket import MessageType
from database.database import session_manager
from database.models import Project
from database.redis import RedisType
from database.repositories import ProjectRepository, TaskRepository


async def redis_get_unique(redis: Redis, key: str, my_dict: dict[str, Any]) -> Any | None:
    value = await redis.get(key)
    if value and (key not in my_dict or my_dict[key] != value):
        my_dict[key] = value
        return value
    return None


def websocket_package(data: Any, package_type: MessageType) -> WebsocketMessage:
    return WebsocketMessage(message_type=package_type, data=data)


async def task_payload(redis: Redis,
                       project: Project,
                       user_id: UUID,
                       ) -> AsyncGenerator[WebsocketMessage | None, None]:
    my_dict = {}
    key = f"{RedisType.project_task_update}:{project.id}"
    # markers set before the connection opened are not replayed
    my_dict[key] = await redis.get(key)
    while True:
        if await redis_get_unique(redis, key, my_dict):
            async with session_manager.context_session() as session:
                tasks = await TaskRepository(session).get_by_project(project)
            yield websocket_package([TaskSchema.from_db(t).model_dump(mode="json") for t in tasks],
                                    "task_update")
        else:
            yield None


async def project_payload(redis: Redis,
                          project: Project,
                          user_id: UUID,
                          ) -> AsyncGenerator[WebsocketMessage | None, None]:
    my_dict = {}
    key = f"{RedisType.project_update}:{project.id}"
    my_dict[key] = await redis.get(key)
    while True:
        data = await redis_get_unique(redis, key, my_dict)
        if data is None or UUID(json.loads(data)["user_id"]) == user_id:
            yield None
            continue
        async with session_manager.context_session() as session:
            updated_project = await ProjectRepository(session).get_by_id(project.id)
        if updated_project is None:
            yield websocket_package({"id": str(project.id)}, "project_deleted")
            return
        yield websocket_package(ProjectSchema.from_db(updated_project, user_id).model_dump(mode="json"),
                                "project_update")


async def wait_for_disconnect(websocket: WebSocket) -> None:
    while True:
        try:
            await websocket.receive_text()
        except WebSocketDisconnect:
            return
