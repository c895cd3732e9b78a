
import logging
from enum import Enum
from typing import Any, Protocol, TypeVar
from uuid import UUID

import httpx
from pydantic import BaseModel, ValidationError

from collabry.schemas import ProjectSchema, TaskCreateSchema, TaskSchema
from database.enums import TaskStatus

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class StoreErrorCode(str, Enum):
    bad_request = "BAD_REQUEST"
    unauthorized = "UNAUTHORIZED"
    forbidden = "FORBIDDEN"
    not_found = "NOT_FOUND"
    conflict = "CONFLICT"
    internal = "INTERNAL"

    def __str__(self) -> str:
        return self.value


HTTP_ERROR_CODES = {
    400: StoreErrorCode.bad_request,
    401: StoreErrorCode.unauthorized,
    403: StoreErrorCode.forbidden,
    404: StoreErrorCode.not_found,
    409: StoreErrorCode.conflict,
    422: StoreErrorCode.bad_request,
}


class TaskStoreError(Exception):
    def __init__(self, code: StoreErrorCode, message: str = ""):
        super().__init__(f"{code}: {message}" if message else str(code))
        self.code = code
        self.message = message


class TaskStore(Protocol):
    async def update_status(self, task_id: UUID, status: TaskStatus) -> TaskSchema:
        ...

    async def get_project_with_tasks(self, project_id: UUID) -> ProjectSchema:
        ...


def _detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return response.text


class HttpTaskStore:
    """TaskStore backed by the Collabry HTTP API.

    The client is expected to carry the session cookies and the API base url,
    for example ``httpx.AsyncClient(base_url="https://collabry.example")``.
    """

    def __init__(self, client: httpx.AsyncClient, prefix: str = "/api"):
        self.client = client
        self.prefix = prefix

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self.client.request(method, f"{self.prefix}{url}", **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TaskStoreError(StoreErrorCode.internal, str(exc)) from exc
        if response.is_error:
            code = HTTP_ERROR_CODES.get(response.status_code, StoreErrorCode.internal)
            raise TaskStoreError(code, _detail(response))
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise TaskStoreError(StoreErrorCode.internal, "malformed response body") from exc

    async def _fetch(self, schema: type[ModelT], method: str, url: str, **kwargs: Any) -> ModelT:
        data = await self._request(method, url, **kwargs)
        try:
            return schema.model_validate(data)
        except ValidationError as exc:
            logger.warning("%s %s returned an unexpected %s", method, url, schema.__name__)
            raise TaskStoreError(StoreErrorCode.internal, str(exc)) from exc

    async def update_status(self, task_id: UUID, status: TaskStatus) -> TaskSchema:
        return await self._fetch(TaskSchema, "PATCH", f"/task/{task_id}/status",
                                 json={"status": str(status)})

    async def get_project_with_tasks(self, project_id: UUID) -> ProjectSchema:
        return await self._fetch(ProjectSchema, "GET", f"/project/{project_id}")

    async def create_task(self, project_id: UUID, form: TaskCreateSchema) -> TaskSchema:
        return await self._fetch(TaskSchema, "POST", f"/task/{project_id}",
                                 json=form.model_dump(mode="json", exclude_none=True))
