
from .board import TaskBoard
from .drag import DraggableLocation, DropOutcome, DropResult, apply_drop
from .forms import TaskFormError, validate_task_form
from .notifier import LoggingNotifier, Notifier
from .partition import Partition, counts, empty_partition, flatten, partition
from .status import COLUMNS, BoardColumn, is_due_soon, is_overdue, time_left
from .store import HttpTaskStore, StoreErrorCode, TaskStore, TaskStoreError
