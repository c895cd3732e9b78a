
import json
from uuid import UUID, uuid4

from redis.asyncio import Redis

from collabry.config import Config
from database.redis import RedisType


async def mark_project_update(redis: Redis, project_id: UUID, user_id: UUID) -> None:
    await redis.set(f"{RedisType.project_update}:{project_id}",
                    json.dumps({"id": str(uuid4()), "user_id": str(user_id)}),
                    ex=Config.websocket_redis_message_lifetime)


async def mark_task_update(redis: Redis, project_id: UUID) -> None:
    await redis.set(f"{RedisType.project_task_update}:{project_id}",
                    str(uuid4()),
                    ex=Config.websocket_redis_message_lifetime)
