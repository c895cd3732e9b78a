from typing import Any, Literal

from pydantic import BaseModel

MessageType = Literal["project_update", "project_deleted", "task_update"]


class WebsocketMessage(BaseModel):
    message_type: MessageType
    data: Any
