
from enum import Enum

from redis.asyncio import Redis

from config import settings


class RedisType(str, Enum):
    incorrect_credentials_ip = "incorrect_credentials_ip"
    invalidated_access_token = "invalidated_access_token"
    project_update = "project_update"
    project_task_update = "project_task_update"

    def __str__(self) -> str:
        return self.value


def get_redis_client() -> Redis:
    return Redis(host=settings.redis_ip,
                 port=settings.redis_port,
                 db=0,
                 decode_responses=True)
