
from pydantic import BaseModel, ConfigDict, Field

from collabry.schemas import TaskSchema
from database.enums import TaskStatus

from .partition import Partition


class DraggableLocation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    droppable_id: str = Field(alias="droppableId")
    index: int = Field(ge=0)


class DropResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    draggable_id: str = Field(alias="draggableId")
    source: DraggableLocation
    destination: DraggableLocation | None = None


class DropOutcome(BaseModel):
    partition: Partition
    task: TaskSchema | None = None
    error: str | None = None

    @property
    def changed(self) -> bool:
        return self.task is not None


def apply_drop(buckets: Partition, result: DropResult) -> DropOutcome:
    """Move the dragged task into the destination bucket.

    Returns the new partition together with the moved task, or the untouched
    partition when the drop is a no-op. The input partition is never mutated.
    """
    source, destination = result.source, result.destination
    if destination is None or destination == source:
        return DropOutcome(partition=buckets)
    if not TaskStatus.is_valid(source.droppable_id) or \
            not TaskStatus.is_valid(destination.droppable_id):
        return DropOutcome(partition=buckets,
                           error=f"Invalid task status in drag and drop: "
                                 f"{source.droppable_id} -> {destination.droppable_id}")
    source_status = TaskStatus(source.droppable_id)
    destination_status = TaskStatus(destination.droppable_id)

    dragged = next((task for task in buckets.get(source_status, [])
                    if str(task.id) == result.draggable_id), None)
    if dragged is None:
        return DropOutcome(partition=buckets)

    new_buckets = {status: list(tasks) for status, tasks in buckets.items()}
    new_buckets[source_status] = [task for task in new_buckets[source_status]
                                  if task.id != dragged.id]
    moved = dragged.model_copy(update={"status": destination_status})
    new_buckets.setdefault(destination_status, []).insert(destination.index, moved)
    return DropOutcome(partition=new_buckets, task=moved)
