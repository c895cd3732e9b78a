

import asyncio
import logging
from typing import AsyncGenerator
from uuid import UUID

from fastapi import WebSocket
from redis.asyncio import Redis

from collabry.config import Config
from collabry.schemas import WebsocketMessage
from database.models import Project

from .payload import project_payload, task_payload, wait_for_disconnect

logger = logging.getLogger(__name__)


async def start_polling(websocket: WebSocket,
                        redis: Redis,
                        project: Project,
                        user_id: UUID
                        ) -> AsyncGenerator[WebsocketMessage, None]:

    generators = [gen(redis, project, user_id)
                  for gen in [project_payload, task_payload]]
    queue: asyncio.Queue[WebsocketMessage] = asyncio.Queue()

    async def consume(gen: AsyncGenerator) -> None:
        async for item in gen:
            if item is None:
                await asyncio.sleep(Config.websocket_polling_interval)
                continue
            await queue.put(item)

    tasks = [asyncio.create_task(consume(g))
             for g in generators]
    running = set(tasks)
    listener = asyncio.create_task(wait_for_disconnect(websocket))

    try:
        while not listener.done():
            getter = asyncio.create_task(queue.get())
            done, _ = await asyncio.wait({getter, listener, *running},
                                         return_when=asyncio.FIRST_COMPLETED)
            if getter in done:
                yield getter.result()
            else:
                getter.cancel()

            failed = False
            for task in done & running:
                running.discard(task)
                if task.exception() is not None:
                    logger.error("websocket feed for project %s failed",
                                 project.id, exc_info=task.exception())
                    failed = True
            if failed:
                break
    finally:
        listener.cancel()
        for task in tasks:
            task.cancel()
